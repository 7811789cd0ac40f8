"""
Process exit codes reported back to the CI runner.
"""

SUCCESS = 0          # Released, or nothing to release
GENERAL_ERROR = 1    # Configuration, data or publish failure
NEUTRAL = 78         # Intentionally did nothing (not on the default branch)
