"""Output formatting for validation results and graph summaries."""

import json
from typing import Any, Literal

from ..render.frame import FrameSnapshot
from ..validators.base import Severity, ValidationIssue, ValidationResult


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return _format_json(result)
    return _format_text(result)


def _format_text(result: ValidationResult) -> str:
    """Format result as human-readable text."""
    errors = result.errors
    warnings = result.warnings

    lines: list[str] = []
    for heading, issues in (("ERRORS", errors), ("WARNINGS", warnings)):
        lines.append(f"{heading}:")
        lines.extend(f"  {_format_issue_text(issue)}" for issue in issues)
        if not issues:
            lines.append("  (none)")
        lines.append("")

    if result.is_valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


_SYMBOLS = {Severity.ERROR: "✘", Severity.WARNING: "⚠"}


def _format_issue_text(issue: ValidationIssue) -> str:
    return f"{_SYMBOLS[issue.severity]} {issue.code}: [{issue.location}] {issue.message}"


def _format_json(result: ValidationResult) -> str:
    """Format result as JSON."""
    data = {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "location": {
                    "node_id": issue.location.node_id,
                    "edge_index": issue.location.edge_index,
                },
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
    return json.dumps(data, indent=2)


def format_graph_summary(
    snapshot: FrameSnapshot,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a frame snapshot as a graph summary.

    Args:
        snapshot: The snapshot to summarize.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    edges = [
        {"source": _node_key(edge.nodes[0]), "target": _node_key(edge.nodes[1])}
        for edge in snapshot.edges
    ]

    if format == "json":
        data = {
            "target": str(snapshot.target),
            "node_count": len(snapshot.nodes),
            "edge_count": len(snapshot.edges),
            "options": snapshot.config,
            "nodes": [
                {"id": getattr(node, "id", None), "label": getattr(node, "label", None)}
                for node in snapshot.nodes
            ],
            "edges": edges,
        }
        return json.dumps(data, indent=2)

    lines = [
        f"Graph on {snapshot.target}: "
        f"{len(snapshot.nodes)} node(s), {len(snapshot.edges)} edge(s)",
        "",
        "OPTIONS:",
    ]
    for key, value in snapshot.config.items():
        lines.append(f"  {key}: {value}")

    lines.append("")
    lines.append("EDGES:")
    if edges:
        for edge in edges:
            lines.append(f"  {edge['source']} -> {edge['target']}")
    else:
        lines.append("  (none)")

    return "\n".join(lines)


def _node_key(node: Any) -> Any:
    """Name a node by its identifier, falling back to its label."""
    node_id = getattr(node, "id", None)
    if node_id is not None:
        return node_id
    return getattr(node, "label", None) or repr(node)
