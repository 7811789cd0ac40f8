# Este archivo decide si el push actual debe generar un release: rama por defecto y commit de release.

"""
Release decision engine.

Checks the branch gate, loads the manifest and scans the pushed commits
for a release commit naming the manifest version.
"""
import re  # Expresiones regulares para el patrón de commit
from pathlib import Path  # Manejo moderno de rutas de archivos
from typing import Iterable, Optional, Union  # Type hints para colecciones y opcionales

from ..config.settings import Settings  # Configuración del action
from ..exceptions import MissingVersionError  # Excepción personalizada para manifest sin versión
from ..models.release import (  # Modelos del evento y resultados
    Commit,
    Decision,
    DecisionStatus,
    EventPayload,
    Manifest,
    ManifestVersion,
    ReleaseConfig,
    TagAuthor,
)
from ..utils.files import load_manifest  # Lectura de package.json
from ..utils.logging import get_logger  # Logger estructurado

logger = get_logger(__name__)


def resolve_config(settings: Settings, event: EventPayload) -> ReleaseConfig:
    """
    Resolve the per-run configuration.

    The tag author falls back to the repository owner when COMMIT_USER or
    COMMIT_EMAIL are not set.
    """
    owner = event.repository.owner
    return ReleaseConfig(
        commit_pattern=settings.commit_pattern,
        tag_name=settings.tag_name,
        tag_message=settings.tag_message,
        tag_author=TagAuthor(
            name=settings.commit_user or owner.name,
            email=settings.commit_email or owner.email,
        ),
        publish_with=settings.publish_with,
    )


def is_default_branch(event: EventPayload, default_branch: str) -> bool:
    """True when the event was pushed to refs/heads/<default_branch>."""
    return event.ref == f"refs/heads/{default_branch}"


def require_version(manifest: Manifest) -> ManifestVersion:
    """
    Return the manifest version.

    Raises:
        MissingVersionError: If the manifest has no version
    """
    if manifest.version is None:
        raise MissingVersionError("missing version field!")
    return manifest.version


def find_release_commit(
    commit_pattern: str,
    commits: Iterable[Commit],
    version: ManifestVersion
) -> Optional[Commit]:
    """
    Find the first commit whose captured version equals the manifest version.

    Commits are examined in the given order and the scan stops at the first
    match. The comparison is literal: "v1.2.3" does not match "1.2.3", and a
    numeric manifest version never equals the captured text.

    Args:
        commit_pattern: Regex with exactly one capture group
        commits: Commits in payload order
        version: Manifest version

    Returns:
        The matching commit, or None
    """
    pattern = re.compile(commit_pattern)
    for commit in commits:
        match = pattern.search(commit.message)
        if match and match.group(1) == version:
            logger.info("release_commit_found", message=commit.message)
            return commit
    return None


def decide(settings: Settings, event: EventPayload, workspace: Union[str, Path]) -> Decision:
    """
    Decide whether this push releases the package.

    The manifest is only read once the branch gate has passed.

    Args:
        settings: Action settings
        event: Parsed event payload
        workspace: Directory containing package.json

    Returns:
        Decision with status PROCEED, WRONG_BRANCH or NO_RELEASE_COMMIT

    Raises:
        DataError: If the manifest is missing, malformed or has no version
    """
    if not is_default_branch(event, settings.default_branch):
        logger.info(
            "not_default_branch",
            ref=event.ref,
            expected_ref=settings.default_ref,
            default_branch=settings.default_branch,
            message=f"you must run this action on {settings.default_branch} branch"
        )
        return Decision(status=DecisionStatus.WRONG_BRANCH)

    config = resolve_config(settings, event)

    manifest = load_manifest(workspace)
    version = require_version(manifest)

    commit = find_release_commit(config.commit_pattern, event.commits, version)
    if commit is None:
        logger.info("no_release_commit", version=version, commits=len(event.commits))
        return Decision(status=DecisionStatus.NO_RELEASE_COMMIT, version=version, config=config)

    return Decision(
        status=DecisionStatus.PROCEED,
        version=version,
        commit=commit,
        config=config
    )
