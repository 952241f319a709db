"""Reading graph documents from YAML files and strings."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import GraphFileValidationError, GraphLoadError
from .models import GraphDocument


def load_yaml(path: str | Path) -> dict:
    """Read a YAML file whose root is a mapping.

    An empty file yields an empty dict.

    Raises:
        GraphLoadError: If the path is not a readable file, the YAML is
            malformed, or the root is not a mapping.
    """
    path = Path(path)

    if not path.is_file():
        reason = "Not a file" if path.exists() else "File not found"
        raise GraphLoadError(f"{reason}: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GraphLoadError(f"Cannot read file: {e}", str(path)) from e

    return _load_mapping(text, str(path))


def parse_document(path: str | Path) -> GraphDocument:
    """Load a graph file into a GraphDocument.

    Raises:
        GraphLoadError: If the file cannot be read or parsed.
        GraphFileValidationError: If nodes, edges or options are malformed.
    """
    return _to_document(load_yaml(path))


def parse_document_from_string(yaml_string: str) -> GraphDocument:
    """Parse YAML text into a GraphDocument.

    Raises:
        GraphLoadError: If the YAML cannot be parsed.
        GraphFileValidationError: If nodes, edges or options are malformed.
    """
    return _to_document(_load_mapping(yaml_string))


def _load_mapping(text: str, path: str | None = None) -> dict:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise GraphLoadError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise GraphLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", path
        )
    return data


def _to_document(data: dict) -> GraphDocument:
    try:
        return GraphDocument.model_validate(data)
    except ValidationError as e:
        problems = [_describe(err) for err in e.errors()]
        raise GraphFileValidationError(
            f"Graph file has {len(problems)} invalid entr{'y' if len(problems) == 1 else 'ies'}",
            problems,
        ) from e


def _describe(err: Any) -> dict:
    """Flatten a pydantic error to ``loc``/``msg``/``type``, e.g. ``edges.0``."""
    return {
        "loc": ".".join(str(part) for part in err["loc"]) or "<root>",
        "msg": err["msg"],
        "type": err["type"],
    }
