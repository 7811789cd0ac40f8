"""
Configuration management using Pydantic Settings.

Every option is read from its environment variable, falling back to the
INPUT_-prefixed variable the CI runner sets for action inputs.
"""
import re
from pathlib import Path
from typing import Mapping, Optional

from pydantic import AliasChoices, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..exceptions import ConfigurationError

PLACEHOLDER = "%s"

DEFAULT_COMMIT_PATTERN = r"^(?:Release|Version) (\S+)"


def _env(name: str) -> AliasChoices:
    return AliasChoices(name, f"INPUT_{name}")


class Settings(BaseSettings):
    """Action settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_ignore_empty=True,
        frozen=True,
        extra="ignore"
    )

    # Release detection
    commit_pattern: str = Field(DEFAULT_COMMIT_PATTERN, validation_alias=_env("COMMIT_PATTERN"))
    default_branch: str = Field("master", validation_alias=_env("DEFAULT_BRANCH"))

    # Tagging
    tag_name: str = Field("v%s", validation_alias=_env("TAG_NAME"))
    tag_message: str = Field("v%s", validation_alias=_env("TAG_MESSAGE"))
    commit_user: Optional[str] = Field(None, validation_alias=_env("COMMIT_USER"))
    commit_email: Optional[str] = Field(None, validation_alias=_env("COMMIT_EMAIL"))

    # Publishing
    publish_with: str = Field("yarn", validation_alias=_env("PUBLISH_WITH"))

    # Runner paths
    workspace: Path = Field(Path("/github/workspace"), validation_alias=_env("GITHUB_WORKSPACE"))
    event_path: Path = Field(Path("/github/workflow/event.json"), validation_alias=_env("GITHUB_EVENT_PATH"))

    # Logging
    log_level: str = Field("INFO", validation_alias=_env("LOG_LEVEL"))
    log_json: bool = Field(False, validation_alias=_env("LOG_JSON"))

    @field_validator("tag_name", "tag_message")
    @classmethod
    def validate_placeholder(cls, v: str, info: ValidationInfo) -> str:
        """Templates must contain the version placeholder."""
        if PLACEHOLDER not in v:
            raise ValueError(f"missing placeholder in variable: {info.field_name.upper()}")
        return v

    @field_validator("commit_pattern")
    @classmethod
    def validate_commit_pattern(cls, v: str) -> str:
        """Pattern must compile and capture exactly one group (the version)."""
        try:
            compiled = re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid commit pattern: {e}")
        if compiled.groups != 1:
            raise ValueError(
                f"commit pattern must have exactly one capture group, found {compiled.groups}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of {valid_levels}")
        return v_upper

    @property
    def default_ref(self) -> str:
        """Full ref of the branch releases are allowed from."""
        return f"refs/heads/{self.default_branch}"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from a key-value source.

    Args:
        environ: Mapping of variable names to values. None reads the
            process environment.

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If any option is invalid
    """
    try:
        if environ is None:
            return Settings()
        # Same rule as env_ignore_empty for the process environment
        values = {key: value for key, value in environ.items() if value}
        return Settings.model_validate(values)
    except PydanticValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        ]
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(errors)}",
            context={"errors": errors}
        ) from e
