"""Graph module for module dependency analysis.

Provides an immutable generic directed graph, transitive closure
computation and DOT output.
"""

from maven_modules.graph.closure import ProcessedVertices, induced_subgraph
from maven_modules.graph.dot import render_dot, to_dot, to_rustworkx
from maven_modules.graph.engine import Graph
from maven_modules.graph.models import Edge, GraphStats, SimpleEdge

__all__ = [
    # Engine
    "Graph",
    # Models
    "Edge",
    "SimpleEdge",
    "GraphStats",
    # Closure
    "ProcessedVertices",
    "induced_subgraph",
    # Output
    "to_dot",
    "to_rustworkx",
    "render_dot",
]
