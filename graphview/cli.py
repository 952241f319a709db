"""Command-line interface for graphview."""

import sys

import click

from .config.logging import configure_logging
from .graph.builder import build_graph
from .graph.errors import UnresolvedNodeReference
from .output.formatter import format_graph_summary, format_validation_result
from .schema.errors import GraphFileValidationError, GraphLoadError
from .schema.loader import parse_document
from .validators.runner import validate_graph_file


def _report_load_error(error: Exception) -> None:
    """Echo a file or schema error to stderr."""
    if isinstance(error, GraphFileValidationError):
        click.echo(f"Graph file error: {error}", err=True)
        for err in error.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
    else:
        click.echo(f"Error loading file: {error}", err=True)


@click.group()
@click.version_option(package_name="graphview")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.option("--log-json", is_flag=True, default=False, help="Emit logs as JSON lines")
def main(verbose: bool, log_json: bool):
    """graphview: a 3D node-edge graph model."""
    configure_logging(verbose=verbose, log_json=log_json)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(graph_file: str, output_format: str, strict: bool):
    """Validate a graph file.

    GRAPH_FILE is the path to a YAML graph file.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File or schema error
    """
    try:
        result = validate_graph_file(graph_file)
    except (GraphLoadError, GraphFileValidationError) as e:
        _report_load_error(e)
        sys.exit(2)

    output = format_validation_result(result, output_format)  # type: ignore
    click.echo(output)

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("graph_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def show(graph_file: str, output_format: str):
    """Build a graph file and print what a renderer would receive.

    GRAPH_FILE is the path to a YAML graph file.

    Exit codes:
      0 - Graph built
      2 - File, schema or unresolved node error
    """
    try:
        document = parse_document(graph_file)
        graph = build_graph(document)
    except (GraphLoadError, GraphFileValidationError) as e:
        _report_load_error(e)
        sys.exit(2)
    except UnresolvedNodeReference as e:
        click.echo(f"Unresolved edge endpoint: {e}", err=True)
        sys.exit(2)

    frame = graph.render_in("stdout")
    click.echo(format_graph_summary(frame.snapshot(), output_format))  # type: ignore
    sys.exit(0)


if __name__ == "__main__":
    main()
