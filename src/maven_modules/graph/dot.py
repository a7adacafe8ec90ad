"""Graphviz DOT output for graphs.

Builds a RustworkX digraph mirroring ``vertices`` and ``edges`` and lets
RustworkX serialize it; rendering to an image shells out to ``dot``.
"""

import subprocess
from pathlib import Path

import rustworkx as rx

from maven_modules.core.exceptions import DotRenderError
from maven_modules.graph.engine import Graph
from maven_modules.graph.models import E, V
from maven_modules.utils.logging import get_logger

logger = get_logger(__name__)


def to_rustworkx(graph: Graph[V, E]) -> "rx.PyDiGraph[V, E]":
    """Copy a graph into a RustworkX directed graph.

    Vertices are added in sorted string order so that output is stable.
    Edges whose endpoints are not vertices are skipped.
    """
    digraph: rx.PyDiGraph = rx.PyDiGraph()
    index_of: dict[V, int] = {}
    for v in sorted(graph.vertices, key=str):
        index_of[v] = digraph.add_node(v)

    for e in sorted(graph.edges, key=lambda e: (str(e.parent), str(e.child))):
        if e.parent in index_of and e.child in index_of:
            digraph.add_edge(index_of[e.parent], index_of[e.child], e)
    return digraph


def to_dot(graph: Graph[V, E]) -> str:
    """Render a graph as DOT text.

    Args:
        graph: The graph to render.

    Returns:
        A ``digraph`` description with one labelled node per vertex.
    """
    digraph = to_rustworkx(graph)
    return digraph.to_dot(node_attr=lambda v: {"label": str(v)})


def render_dot(
    dot: str,
    dot_file: Path | str,
    output_file: Path | str,
    image_type: str = "png",
) -> Path:
    """Write DOT text to a file and render it with Graphviz.

    Args:
        dot: DOT text.
        dot_file: Where to write the DOT text.
        output_file: Image to produce.
        image_type: Graphviz output format.

    Returns:
        Path to the rendered image.

    Raises:
        DotRenderError: If the DOT file cannot be written, or ``dot`` is
            missing or exits with an error.
    """
    dot_file = Path(dot_file)
    output_file = Path(output_file)
    command = ["dot", f"-T{image_type}", str(dot_file), "-o", str(output_file)]
    try:
        dot_file.write_text(dot, encoding="utf-8")
        completed = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError as e:
        raise DotRenderError(str(dot_file), None, cause=e) from e

    if completed.returncode != 0:
        logger.error(
            "Graphviz failed",
            dot_file=str(dot_file),
            returncode=completed.returncode,
            stderr=completed.stderr.strip(),
        )
        raise DotRenderError(str(dot_file), completed.returncode)

    logger.info("Rendered dot file", dot_file=str(dot_file), output_file=str(output_file))
    return output_file
