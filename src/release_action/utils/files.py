"""
Event payload and package manifest loading.

Reads JSON documents from disk and validates them into models.
"""
import json
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ParseError, ReadError
from ..models.release import EventPayload, Manifest
from .logging import get_logger

logger = get_logger(__name__)

MANIFEST_FILE = "package.json"


def read_json(path: Union[str, Path]) -> Any:
    """
    Read a UTF-8 JSON file and return the parsed tree.

    Args:
        path: File to read

    Returns:
        Parsed JSON value

    Raises:
        ReadError: If the file is missing or the path cannot be read
        ParseError: If the content is not well-formed JSON
    """
    filepath = Path(path)
    try:
        text = filepath.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(
            f"File is not valid UTF-8: {filepath}",
            context={"filepath": str(filepath), "error": str(e)}
        ) from e
    except OSError as e:
        raise ReadError(
            f"Failed to read {filepath}: {e.strerror or e}",
            context={"filepath": str(filepath)}
        ) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Failed to parse {filepath}: {e}",
            context={"filepath": str(filepath), "line": e.lineno, "column": e.colno}
        ) from e


def load_event(path: Union[str, Path]) -> EventPayload:
    """Load the CI event payload."""
    data = read_json(path)
    try:
        event = EventPayload.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(
            f"Unexpected event payload in {path}",
            context={"filepath": str(path), "errors": e.errors(include_url=False)}
        ) from e

    logger.debug("event_loaded", ref=event.ref, commits=len(event.commits))
    return event


def load_manifest(workspace: Union[str, Path]) -> Manifest:
    """
    Load package.json from the workspace directory.

    Args:
        workspace: Directory containing the package

    Returns:
        Parsed manifest (version may still be None)

    Raises:
        ReadError: If package.json is missing
        ParseError: If package.json is malformed
    """
    manifest_file = Path(workspace) / MANIFEST_FILE
    data = read_json(manifest_file)

    # "null" is a valid document but carries no version
    if data is None:
        return Manifest()

    try:
        return Manifest.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(
            f"Unexpected manifest content in {manifest_file}",
            context={"filepath": str(manifest_file), "errors": e.errors(include_url=False)}
        ) from e
