"""Validation runner that orchestrates all validators."""

from pathlib import Path

from ..schema.loader import parse_document
from ..schema.models import GraphDocument
from .base import ValidationResult
from .isolated_nodes import check_isolated_nodes
from .reference_integrity import check_duplicate_node_ids, check_node_references


def run_validators(document: GraphDocument) -> ValidationResult:
    """Run all validators on a graph document.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()

    result.merge(check_node_references(document))
    result.merge(check_duplicate_node_ids(document))
    result.merge(check_isolated_nodes(document))

    return result


def validate_graph_file(path: str | Path) -> ValidationResult:
    """Load and validate a graph file.

    Raises:
        GraphLoadError: If the file cannot be loaded.
        GraphFileValidationError: If the document fails schema validation.
    """
    document = parse_document(path)
    return run_validators(document)
