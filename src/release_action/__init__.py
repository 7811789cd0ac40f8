# Este archivo marca el paquete release_action y expone la versión del proyecto.

"""
Release Action - tag and publish a package when a release commit lands on the default branch.
"""

__version__ = "0.1.0"
__author__ = "Kratosvil"
__description__ = "CI step that tags and publishes npm packages on release commits"

# Expose main components for easier imports
from .action import main, run_release

__all__ = ["main", "run_release", "__version__"]
