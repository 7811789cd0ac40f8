# Este archivo implementa el paso de tagging: renderiza el nombre del tag, evita duplicados y lo publica.

"""
Release tagging step.

Tagging is best-effort: failures are logged as warnings and the release
continues to the publish step.
"""
from pathlib import Path  # Manejo moderno de rutas de archivos
from typing import Union  # Type hints para uniones de tipos

from ..config.settings import PLACEHOLDER  # Marcador de versión en plantillas
from ..exceptions import ExitError, ReleaseActionError  # Excepciones personalizadas
from ..models.release import ReleaseConfig, TagStatus  # Configuración y resultado del tag
from ..utils.git_utils import (  # Operaciones de Git
    configure_identity,
    create_annotated_tag,
    push_tag,
    tag_exists,
)
from ..utils.logging import get_logger  # Logger estructurado

logger = get_logger(__name__)


def render_template(template: str, version: str) -> str:
    """Replace every placeholder occurrence with the version."""
    return template.replace(PLACEHOLDER, version)


def create_tag(cwd: Union[str, Path], config: ReleaseConfig, version: str) -> TagStatus:
    """
    Create and push the release tag.

    Args:
        cwd: Repository working directory
        config: Resolved release configuration
        version: Manifest version

    Returns:
        TagStatus.CREATED, or TagStatus.ALREADY_EXISTS when the tag is present

    Raises:
        ReleaseActionError: If any git step fails
    """
    tag_name = render_template(config.tag_name, version)
    tag_message = render_template(config.tag_message, version)

    if tag_exists(cwd, tag_name):
        logger.info("tag_already_exists", tag=tag_name)
        return TagStatus.ALREADY_EXISTS

    configure_identity(cwd, config.tag_author)
    create_annotated_tag(cwd, tag_name, tag_message)
    push_tag(cwd, tag_name)

    logger.info("tag_created", tag=tag_name)
    return TagStatus.CREATED


def tag_release(cwd: Union[str, Path], config: ReleaseConfig, version: str) -> TagStatus:
    """
    Run the tagging step without letting it abort the release.

    Returns:
        The tag status; TagStatus.FAILED when any git step failed
    """
    try:
        return create_tag(cwd, config, version)
    except ReleaseActionError as e:
        logger.warning(
            "tag_creation_failed",
            error=str(e),
            stderr=e.stderr if isinstance(e, ExitError) else None,
            context=e.context
        )
        return TagStatus.FAILED
