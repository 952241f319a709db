"""Integration tests for CLI."""

import json

import pytest
from click.testing import CliRunner

from graphview.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestValidateCommand:
    def test_validate_valid_file(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "minimal_valid.yaml")]
        )

        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_validate_with_errors(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "invalid" / "broken_reference.yaml")]
        )

        assert result.exit_code == 1
        assert "UNRESOLVED_NODE_REF" in result.output

    def test_validate_with_warnings(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "invalid" / "duplicate_id.yaml")]
        )

        assert result.exit_code == 0
        assert "DUPLICATE_NODE_ID" in result.output

    def test_validate_strict_mode(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "validate",
                str(examples_dir / "invalid" / "isolated_node.yaml"),
                "--strict",
            ],
        )

        assert result.exit_code == 1

    def test_validate_json_output(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "validate",
                str(examples_dir / "minimal_valid.yaml"),
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["valid"] is True
        assert data["issues"] == []

    def test_validate_schema_error(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "invalid" / "bad_edge.yaml")]
        )

        assert result.exit_code == 2
        assert "edges.0" in result.output

    def test_validate_nonexistent_file(self, runner):
        result = runner.invoke(main, ["validate", "/nonexistent/graph.yaml"])

        assert result.exit_code == 2


class TestShowCommand:
    def test_show_text(self, runner, examples_dir):
        result = runner.invoke(main, ["show", str(examples_dir / "minimal_valid.yaml")])

        assert result.exit_code == 0
        assert "2 node(s), 1 edge(s)" in result.output
        assert "antialias: True" in result.output
        assert "a -> b" in result.output

    def test_show_json(self, runner, examples_dir):
        result = runner.invoke(
            main, ["show", str(examples_dir / "triangle.yaml"), "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["target"] == "stdout"
        assert data["node_count"] == 4
        assert data["edges"] == [
            {"source": 1, "target": 2},
            {"source": 2, "target": 3},
            {"source": 3, "target": 1},
        ]
        assert data["options"]["edgeOpacity"] == 0.5

    def test_show_unresolved_reference(self, runner, examples_dir):
        result = runner.invoke(
            main, ["show", str(examples_dir / "invalid" / "broken_reference.yaml")]
        )

        assert result.exit_code == 2
        assert "missing" in result.output

    def test_show_with_logging_flags(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "--verbose",
                "--log-json",
                "show",
                str(examples_dir / "minimal_valid.yaml"),
            ],
        )

        assert result.exit_code == 0
