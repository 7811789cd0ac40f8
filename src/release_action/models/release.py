"""
Pydantic models for release detection.

Defines the shape of the CI event payload, the package manifest and the
results each step of the action reports.
"""
from enum import Enum  # Crear enumeraciones con valores fijos
from typing import Any, Optional, List, Union  # Type hints para tipos opcionales, listas y uniones

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator  # BaseModel: clase base para modelos, Field: validación de campos
from pydantic import StrictFloat, StrictInt, StrictStr  # Tipos estrictos para la versión del manifest

from .. import exit_codes  # Códigos de salida del proceso

# package.json may carry a bare number; it never matches a commit but is not malformed
ManifestVersion = Union[StrictStr, StrictInt, StrictFloat]


class PublishStrategy(str, Enum):
    """Supported package publish commands."""
    YARN = "yarn"
    NPM = "npm"
    SKIP = "skip"


class DecisionStatus(str, Enum):
    """Result of evaluating an event (tagged result, never an exception)."""
    PROCEED = "proceed"
    WRONG_BRANCH = "wrong_branch"
    NO_RELEASE_COMMIT = "no_release_commit"


class TagStatus(str, Enum):
    """Result of the tagging step."""
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"


class RunOutcome(str, Enum):
    """Final state of one action run."""
    WRONG_BRANCH = "wrong_branch"
    NO_RELEASE_COMMIT = "no_release_commit"
    TAGGED_AND_PUBLISHED = "tagged_and_published"
    TAG_EXISTED_AND_PUBLISHED = "tag_existed_and_published"
    TAG_FAILED_BUT_PUBLISHED = "tag_failed_but_published"
    PUBLISH_FAILED = "publish_failed"

    @property
    def exit_code(self) -> int:
        """Process exit code the CI runner sees for this outcome."""
        if self is RunOutcome.WRONG_BRANCH:
            return exit_codes.NEUTRAL
        if self is RunOutcome.PUBLISH_FAILED:
            return exit_codes.GENERAL_ERROR
        return exit_codes.SUCCESS


class Owner(BaseModel):
    """Repository owner identity from the event payload."""
    name: Optional[str] = Field(None, description="Owner login or display name")
    email: Optional[str] = Field(None, description="Owner email address")


class Repository(BaseModel):
    """Repository section of the event payload."""
    owner: Owner = Field(default_factory=Owner, description="Repository owner")

    @field_validator("owner", mode="before")
    @classmethod
    def null_owner(cls, v: Any) -> Any:
        """A null owner is treated as an owner with no identity."""
        return {} if v is None else v


class Commit(BaseModel):
    """Single pushed commit."""
    message: str = Field("", description="Full commit message")


class EventPayload(BaseModel):
    """Push event payload written by the CI runner."""
    ref: Optional[str] = Field(None, description="Pushed ref, e.g. refs/heads/master")
    repository: Repository = Field(default_factory=Repository, description="Repository metadata")
    commits: List[Commit] = Field(default_factory=list, description="Pushed commits in payload order")

    @field_validator("repository", "commits", mode="before")
    @classmethod
    def null_sections(cls, v: Any, info: ValidationInfo) -> Any:
        """Null sections read as empty so the branch gate can still run."""
        if v is None:
            return [] if info.field_name == "commits" else {}
        return v


class Manifest(BaseModel):
    """The fields of package.json the action needs."""
    version: Optional[ManifestVersion] = Field(None, description="Package semantic version")


class TagAuthor(BaseModel):
    """Identity used for the annotated tag."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(None, description="git user.name")
    email: Optional[str] = Field(None, description="git user.email")


class ReleaseConfig(BaseModel):
    """Configuration resolved once per run from settings and the event."""
    model_config = ConfigDict(frozen=True)

    commit_pattern: str = Field(..., description="Regex with one capture group for the version")
    tag_name: str = Field(..., description="Tag name template containing %s")
    tag_message: str = Field(..., description="Tag message template containing %s")
    tag_author: TagAuthor = Field(..., description="Tagger identity")
    publish_with: str = Field(..., description="Configured publish strategy")


class Decision(BaseModel):
    """Outcome of the decision engine."""
    model_config = ConfigDict(frozen=True)

    status: DecisionStatus = Field(..., description="Whether the release proceeds")
    version: Optional[ManifestVersion] = Field(None, description="Manifest version once the branch gate passed")
    commit: Optional[Commit] = Field(None, description="First commit that matched the version")
    config: Optional[ReleaseConfig] = Field(None, description="Resolved configuration when proceeding")

    @property
    def should_release(self) -> bool:
        """True when the release commit was found and tagging should start."""
        return self.status is DecisionStatus.PROCEED
