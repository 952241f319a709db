"""Tests for validation issues and results."""

from graphview.validators.base import Location, Severity, ValidationResult


class TestLocation:
    def test_edge_location(self):
        assert str(Location(edge_index=3)) == "edge 3"

    def test_node_location(self):
        assert str(Location(node_id="a")) == "node a"

    def test_document_location(self):
        assert str(Location()) == "document"


class TestValidationResult:
    def test_edge_issues_default_to_errors(self):
        result = ValidationResult()
        result.at_edge(1, "UNRESOLVED_NODE_REF", "bad endpoint", slot=0)

        assert not result.is_valid
        issue = result.errors[0]
        assert issue.location == Location(edge_index=1)
        assert issue.details == {"slot": 0}
        assert str(issue) == "ERROR: UNRESOLVED_NODE_REF [edge 1] - bad endpoint"

    def test_node_issues_default_to_warnings(self):
        result = ValidationResult()
        result.at_node("a", "ISOLATED_NODE", "alone")

        assert result.is_valid
        assert result.has_warnings
        assert result.warnings[0].location == Location(node_id="a")

    def test_explicit_severity(self):
        result = ValidationResult()
        result.at_node("a", "DUPLICATE_NODE_ID", "twice", severity=Severity.ERROR)

        assert result.has_errors
        assert not result.has_warnings

    def test_only_errors_and_warnings(self):
        assert {severity.value for severity in Severity} == {"error", "warning"}

    def test_merge_keeps_order(self):
        first = ValidationResult()
        first.at_edge(0, "UNRESOLVED_NODE_REF", "one")
        second = ValidationResult()
        second.at_node("b", "ISOLATED_NODE", "two")

        first.merge(second)

        assert [issue.code for issue in first.issues] == ["UNRESOLVED_NODE_REF", "ISOLATED_NODE"]
