# Este archivo maneja las operaciones de Git para el release: verificar tags, identidad, crear y publicar el tag.

"""
Git tag operations.

Thin wrappers around the git subcommands the release step needs. All of
them run through run_command so every invocation is logged.
"""
from pathlib import Path  # Manejo moderno de rutas de archivos
from typing import Union  # Type hints para uniones de tipos

from ..exceptions import ConfigurationError, ExitError  # Excepciones personalizadas
from ..models.release import TagAuthor  # Identidad del autor del tag
from .logging import get_logger  # Logger estructurado
from .process import run_command  # Ejecución de comandos externos

logger = get_logger(__name__)

DEFAULT_REMOTE = "origin"


def tag_ref(tag_name: str) -> str:
    """Full ref for a tag name."""
    return f"refs/tags/{tag_name}"


def tag_exists(cwd: Union[str, Path], tag_name: str) -> bool:
    """
    Check whether a tag already exists in the local repository.

    Args:
        cwd: Repository working directory
        tag_name: Tag name without the refs/tags/ prefix

    Returns:
        True if the tag exists

    Raises:
        CommandError: If git fails for any reason other than a missing ref
    """
    try:
        run_command(cwd, "git", "rev-parse", "-q", "--verify", tag_ref(tag_name))
    except ExitError as e:
        # rev-parse --verify -q exits 1 when the ref does not resolve
        if e.code == 1:
            return False
        raise
    return True


def configure_identity(cwd: Union[str, Path], author: TagAuthor) -> None:
    """
    Set the repository-local git identity used for the tag.

    Args:
        cwd: Repository working directory
        author: Tagger name and email

    Raises:
        ConfigurationError: If name or email is missing
        CommandError: If git config fails
    """
    if not author.name or not author.email:
        raise ConfigurationError(
            "Tag author name and email are required (set COMMIT_USER and COMMIT_EMAIL)",
            context={"name": author.name, "email": author.email}
        )

    run_command(cwd, "git", "config", "user.name", author.name)
    run_command(cwd, "git", "config", "user.email", author.email)

    logger.info("git_identity_configured", name=author.name, email=author.email)


def create_annotated_tag(cwd: Union[str, Path], tag_name: str, message: str) -> None:
    """Create an annotated tag at HEAD."""
    run_command(cwd, "git", "tag", "-a", "-m", message, tag_name)


def push_tag(cwd: Union[str, Path], tag_name: str, remote: str = DEFAULT_REMOTE) -> None:
    """Push exactly one tag ref to the remote."""
    run_command(cwd, "git", "push", remote, tag_ref(tag_name))
