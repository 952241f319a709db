"""Validators for graph documents."""

from .base import Location, Severity, ValidationIssue, ValidationResult
from .isolated_nodes import build_topology, check_isolated_nodes
from .reference_integrity import check_duplicate_node_ids, check_node_references
from .runner import run_validators, validate_graph_file

__all__ = [
    "Location",
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "build_topology",
    "check_isolated_nodes",
    "check_duplicate_node_ids",
    "check_node_references",
    "run_validators",
    "validate_graph_file",
]
