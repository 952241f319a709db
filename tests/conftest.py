"""Shared fixtures for tests."""

import logging
from pathlib import Path

import pytest
import structlog

from graphview.graph.builder import build_graph
from graphview.graph.entities import Node
from graphview.graph.graph import Graph
from graphview.schema.loader import parse_document_from_string


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a test (or the CLI) installs."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
    logging.getLogger("graphview").setLevel(logging.NOTSET)


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def node_a() -> Node:
    return Node("a", label="A")


@pytest.fixture
def node_b() -> Node:
    return Node("b", label="B")


@pytest.fixture
def graph_ab(node_a, node_b) -> Graph:
    """Return a graph holding nodes 'a' and 'b' and no edges."""
    return Graph().add_node(node_a).add_node(node_b)


@pytest.fixture
def chain_document_yaml() -> str:
    """Return a small graph document with a chain of three nodes."""
    return """
options:
  edgeWidth: 3
  bgColor: black

nodes:
  - id: x
    label: X
  - id: y
    label: Y
  - id: z
    label: Z
    position: [0, 0, 5]
    group: tail

edges:
  - [x, y]
  - source: y
    target: z
    weight: 2
"""


@pytest.fixture
def chain_document(chain_document_yaml):
    """Return a parsed chain document."""
    return parse_document_from_string(chain_document_yaml)


@pytest.fixture
def chain_graph(chain_document):
    """Return a graph built from the chain document."""
    return build_graph(chain_document)
