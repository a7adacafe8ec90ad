"""Module graph builder.

Turns parsed POMs into a graph with one vertex per project module and
one edge per dependency between project modules.
"""

from collections.abc import Iterable
from pathlib import Path

from maven_modules.config import MavenSettings, get_settings
from maven_modules.core.exceptions import InvalidProjectError
from maven_modules.maven.models import MavenEdge, MavenGraph, MavenPom, MavenVertex
from maven_modules.maven.parser import parse_dir
from maven_modules.utils.logging import get_logger

logger = get_logger(__name__)


def pom_edges(pom: MavenPom, include_parent_edges: bool = False) -> list[MavenEdge]:
    """Get the raw dependency edges declared by a POM.

    Args:
        pom: The parsed POM.
        include_parent_edges: Also link the module to its parent POM.

    Returns:
        Edges from the module to each dependency.
    """
    module = pom.coordinate.to_vertex()
    edges = [MavenEdge(module, dependency.to_vertex()) for dependency in pom.dependencies]
    if include_parent_edges and pom.parent is not None:
        edges.append(MavenEdge(module, pom.parent.to_vertex()))
    return edges


def build_graph(poms: Iterable[MavenPom], include_parent_edges: bool = False) -> MavenGraph:
    """Build the module graph.

    External dependencies are dropped: an edge is kept only when both
    ends are project modules. Edge endpoints are replaced with the module
    vertices so that they carry the module's own coordinate.

    Args:
        poms: Parsed POMs; the last one is the project root.
        include_parent_edges: Treat a parent POM as a dependency.

    Returns:
        The module graph.

    Raises:
        InvalidProjectError: If ``poms`` is empty.
    """
    poms = list(poms)
    if not poms:
        raise InvalidProjectError("<none>", "No modules to build a graph from")

    modules: dict[MavenVertex, MavenVertex] = {}
    for pom in poms:
        vertex = pom.coordinate.to_vertex()
        modules.setdefault(vertex, vertex)

    edges: set[MavenEdge] = set()
    for pom in poms:
        for edge in pom_edges(pom, include_parent_edges):
            if edge.parent in modules and edge.child in modules:
                edges.add(MavenEdge(modules[edge.parent], modules[edge.child]))

    root = modules[poms[-1].coordinate.to_vertex()]
    graph: MavenGraph = MavenGraph(modules.values(), edges, root)

    logger.info(
        "Built module graph",
        module_count=len(graph.vertices),
        edge_count=len(graph.edges),
        root=str(root),
    )
    return graph


def maven_graph(directory: Path | str, settings: MavenSettings | None = None) -> MavenGraph:
    """Parse a Maven project directory into its module graph.

    Args:
        directory: Project root.
        settings: Maven settings; defaults to the application settings.

    Returns:
        The module graph.
    """
    settings = settings or get_settings().maven
    poms = parse_dir(Path(directory), settings)
    return build_graph(poms, include_parent_edges=settings.include_parent_edges)
