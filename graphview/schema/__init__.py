"""Schema layer for graph options and YAML graph documents."""

from .errors import GraphFileValidationError, GraphLoadError
from .models import EdgeSpec, GraphDocument, GraphOptions, NodeSpec
from .loader import load_yaml, parse_document, parse_document_from_string

__all__ = [
    "GraphFileValidationError",
    "GraphLoadError",
    "EdgeSpec",
    "GraphDocument",
    "GraphOptions",
    "NodeSpec",
    "load_yaml",
    "parse_document",
    "parse_document_from_string",
]
