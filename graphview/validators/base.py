"""Validation issues located on the nodes and edges of a graph document."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """How a document problem affects building the graph.

    ERROR issues make ``build_graph`` fail; WARNING issues build but
    probably not the way the author meant.
    """

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Location:
    """Where an issue sits: a declared node, an edge, or the whole document."""

    node_id: str | int | float | None = None
    edge_index: int | None = None

    def __str__(self) -> str:
        if self.edge_index is not None:
            return f"edge {self.edge_index}"
        if self.node_id is not None:
            return f"node {self.node_id}"
        return "document"


@dataclass
class ValidationIssue:
    code: str
    message: str
    severity: Severity
    location: Location = field(default_factory=Location)
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.severity.value.upper()}: {self.code} [{self.location}] - {self.message}"


@dataclass
class ValidationResult:
    """Issues collected from one or more validators, in report order."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def _with_severity(self, severity: Severity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self._with_severity(Severity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self._with_severity(Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def is_valid(self) -> bool:
        """A document is valid when it would build without errors."""
        return not self.has_errors

    def at_edge(
        self,
        edge_index: int,
        code: str,
        message: str,
        severity: Severity = Severity.ERROR,
        **details: Any,
    ) -> None:
        """Record an issue on the edge at ``edge_index`` (an error by default)."""
        self.issues.append(
            ValidationIssue(code, message, severity, Location(edge_index=edge_index), details)
        )

    def at_node(
        self,
        node_id: str | int | float,
        code: str,
        message: str,
        severity: Severity = Severity.WARNING,
        **details: Any,
    ) -> None:
        """Record an issue on the node declared as ``node_id`` (a warning by default)."""
        self.issues.append(
            ValidationIssue(code, message, severity, Location(node_id=node_id), details)
        )

    def merge(self, other: "ValidationResult") -> None:
        self.issues.extend(other.issues)
