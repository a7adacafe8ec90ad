"""Immutable directed graph.

Provides the core graph data structure and adjacency queries used by the
closure engine and the deletion-impact analysis. A graph never changes
after construction; shrinking it yields a new instance.
"""

import threading
from collections.abc import Iterable
from typing import Generic

from maven_modules.core.exceptions import VertexNotFoundError
from maven_modules.graph.models import E, GraphStats, V
from maven_modules.utils.logging import get_logger

logger = get_logger(__name__)


class Graph(Generic[V, E]):
    """A directed graph of vertices ``V`` and edges ``E``.

    An edge ``e`` means ``e.parent`` depends on ``e.child``. The vertex to
    edges index is derived from ``edges`` on first query and then reused
    for the lifetime of the instance.
    """

    def __init__(self, vertices: Iterable[V], edges: Iterable[E], root: V) -> None:
        """Initialize the graph.

        Args:
            vertices: The vertices of the graph.
            edges: The edges of the graph; endpoints should be in ``vertices``.
            root: Distinguished entry vertex, carried as metadata.
        """
        self._vertices: frozenset[V] = frozenset(vertices)
        self._edges: frozenset[E] = frozenset(edges)
        self._root = root
        self._index: dict[V, frozenset[E]] | None = None
        self._index_lock = threading.Lock()

    @property
    def vertices(self) -> frozenset[V]:
        """All vertices of the graph."""
        return self._vertices

    @property
    def edges(self) -> frozenset[E]:
        """All edges of the graph."""
        return self._edges

    @property
    def root(self) -> V:
        """The root vertex."""
        return self._root

    def _edges_by_vertex(self) -> dict[V, frozenset[E]]:
        index = self._index
        if index is None:
            with self._index_lock:
                if self._index is None:
                    self._index = self._build_index()
                index = self._index
        return index

    def _build_index(self) -> dict[V, frozenset[E]]:
        touching: dict[V, set[E]] = {}
        for edge in self._edges:
            touching.setdefault(edge.parent, set()).add(edge)
            touching.setdefault(edge.child, set()).add(edge)

        logger.debug(
            "Built edge index",
            vertex_count=len(touching),
            edge_count=len(self._edges),
        )
        return {v: frozenset(es) for v, es in touching.items()}

    def edges_of_vertex(self, v: V) -> frozenset[E]:
        """Get all edges touching a vertex.

        Args:
            v: The vertex.

        Returns:
            Edges where ``v`` is parent or child; empty for unknown vertices.
        """
        return self._edges_by_vertex().get(v, frozenset())

    def outgoing_edges_of_vertex(self, v: V) -> frozenset[E]:
        """Get edges where ``v`` is the parent."""
        return frozenset(e for e in self.edges_of_vertex(v) if e.parent == v)

    def incoming_edges_of_vertex(self, v: V) -> frozenset[E]:
        """Get edges where ``v`` is the child."""
        return frozenset(e for e in self.edges_of_vertex(v) if e.child == v)

    def children_of_vertex(self, v: V) -> frozenset[V]:
        """Get the direct dependencies of ``v``."""
        return frozenset(e.child for e in self.outgoing_edges_of_vertex(v))

    def parents_of_vertex(self, v: V) -> frozenset[V]:
        """Get the direct dependents of ``v``."""
        return frozenset(e.parent for e in self.incoming_edges_of_vertex(v))

    def order(self, v: V) -> int:
        """Number of edges touching ``v``."""
        return len(self.edges_of_vertex(v))

    def order_outgoing(self, v: V) -> int:
        """Number of edges leaving ``v``."""
        return sum(1 for e in self.edges_of_vertex(v) if e.parent == v)

    def order_incoming(self, v: V) -> int:
        """Number of edges entering ``v``."""
        return sum(1 for e in self.edges_of_vertex(v) if e.child == v)

    def verify_vertex_exists(self, v: V) -> None:
        """Check that ``v`` is a vertex of this graph.

        Raises:
            VertexNotFoundError: If ``v`` is not in ``vertices``.
        """
        if v not in self._vertices:
            raise VertexNotFoundError(v)

    def remove_all(self, to_remove: Iterable[V]) -> "Graph[V, E]":
        """Remove vertices and every edge touching them.

        Args:
            to_remove: Vertices to remove.

        Returns:
            A new graph; this graph itself when nothing is removed.
        """
        to_remove = frozenset(to_remove)
        if not to_remove:
            return self

        edges_to_remove: set[E] = set()
        for v in to_remove:
            edges_to_remove.update(self.edges_of_vertex(v))

        remaining = Graph(
            self._vertices - to_remove,
            self._edges - edges_to_remove,
            self._root,
        )
        logger.debug(
            "Removed vertices",
            removed_vertices=len(self._vertices) - len(remaining.vertices),
            removed_edges=len(self._edges) - len(remaining.edges),
        )
        return remaining

    def induced_subgraph(self, v: V, max_workers: int | None = None) -> "Graph[V, E]":
        """Get the transitive dependency closure of ``v``.

        Args:
            v: The start vertex.
            max_workers: Worker threads for the traversal; sequential when
                None or 1.

        Returns:
            A new graph rooted at ``v``.

        Raises:
            VertexNotFoundError: If ``v`` is not in ``vertices``.
        """
        from maven_modules.graph.closure import induced_subgraph

        return induced_subgraph(self, v, max_workers=max_workers)

    def stats(self) -> GraphStats:
        """Get statistics about the graph."""
        return GraphStats(
            vertex_count=len(self._vertices),
            edge_count=len(self._edges),
            root_count=sum(1 for v in self._vertices if self.order_incoming(v) == 0),
            leaf_count=sum(1 for v in self._vertices if self.order_outgoing(v) == 0),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self._vertices == other._vertices
            and self._edges == other._edges
            and self._root == other._root
        )

    def __hash__(self) -> int:
        return hash((self._vertices, self._edges, self._root))

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, v: object) -> bool:
        return v in self._vertices

    def __repr__(self) -> str:
        vertices = ", ".join(sorted(str(v) for v in self._vertices))
        edges = ", ".join(sorted(f"{e.parent}->{e.child}" for e in self._edges))
        return f"G(V({vertices}), E({edges}), {self._root})"
