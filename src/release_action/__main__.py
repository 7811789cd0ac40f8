# Este archivo permite ejecutar el action como módulo Python usando: python -m release_action

"""
Entry point for running the release action as a Python module.

Usage:
    python -m release_action
"""

from .action import main_cli

if __name__ == "__main__":
    main_cli()
