"""
Custom exception hierarchy for the release action.

Each exception carries a context dict for structured logging.
"""


class ReleaseActionError(Exception):
    """Base exception for all release action errors."""

    def __init__(self, message: str, context: dict = None):
        self.context = context or {}
        super().__init__(message)


class ConfigurationError(ReleaseActionError):
    """Raised when a configuration option is invalid."""
    pass


class UnsupportedStrategyError(ConfigurationError):
    """Raised when PUBLISH_WITH names an unknown publish strategy."""
    pass


class DataError(ReleaseActionError):
    """Base exception for event payload and manifest problems."""
    pass


class ReadError(DataError):
    """Raised when an input file is missing or cannot be read."""
    pass


class ParseError(DataError):
    """Raised when an input file is not well-formed."""
    pass


class MissingVersionError(DataError):
    """Raised when the package manifest has no version field."""
    pass


class CommandError(ReleaseActionError):
    """Raised when an external command cannot be launched."""
    pass


class ExitError(CommandError):
    """Raised when an external command exits with a non-zero code."""

    def __init__(self, code: int, stderr: str = "", context: dict = None):
        self.code = code
        self.stderr = stderr
        super().__init__(f"command failed with code {code}", context=context)
