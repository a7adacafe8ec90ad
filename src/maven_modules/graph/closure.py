"""Closure engine: transitive dependency closure of a vertex.

The graph is a DAG, so a shared dependency can be reached along many
paths. Every traversal carries its own ``ProcessedVertices`` marker and a
vertex is expanded only by the branch that claims it first; other branches
reaching it contribute the vertex alone.
"""

import threading
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from functools import reduce
from typing import Generic

from maven_modules.graph.engine import Graph
from maven_modules.graph.models import E, V
from maven_modules.utils.logging import get_logger

logger = get_logger(__name__)

Partial = tuple[frozenset, frozenset]
Mapper = Callable[..., Iterable]

_EMPTY: Partial = (frozenset(), frozenset())


class ProcessedVertices(Generic[V]):
    """Thread-safe set of vertices already claimed for expansion."""

    def __init__(self) -> None:
        self._claimed: set[V] = set()
        self._lock = threading.Lock()

    def claim(self, v: V) -> bool:
        """Atomically mark ``v`` as processed.

        Returns:
            True for the first caller only.
        """
        with self._lock:
            if v in self._claimed:
                return False
            self._claimed.add(v)
            return True

    def __contains__(self, v: object) -> bool:
        with self._lock:
            return v in self._claimed

    def __len__(self) -> int:
        with self._lock:
            return len(self._claimed)


def union(a: Partial, b: Partial) -> Partial:
    """Combine two partial ``(vertices, edges)`` results."""
    return a[0] | b[0], a[1] | b[1]


@contextmanager
def parallel_map(max_workers: int | None) -> Iterator[Mapper]:
    """Yield a ``map`` that fans out over a thread pool when asked to.

    Args:
        max_workers: Pool size; the builtin sequential ``map`` when None or 1.
    """
    if max_workers is None or max_workers <= 1:
        yield map
        return

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="closure") as pool:
        yield pool.map


def _expand(graph: Graph[V, E], v: V, processed: ProcessedVertices[V]) -> Partial:
    if not processed.claim(v):
        return frozenset((v,)), frozenset()
    return frozenset((v,)), graph.outgoing_edges_of_vertex(v)


def induced_subgraph(
    graph: Graph[V, E],
    v: V,
    max_workers: int | None = None,
) -> Graph[V, E]:
    """Compute the sub-graph of everything ``v`` transitively depends on.

    Each frontier of vertices is expanded with one task per vertex and the
    partial results are reduced with set union, so the result does not
    depend on scheduling.

    Args:
        graph: The graph to traverse.
        v: The start vertex.
        max_workers: Worker threads; sequential when None or 1.

    Returns:
        A new graph rooted at ``v`` holding the reachable vertices and the
        outgoing edges among them.

    Raises:
        VertexNotFoundError: If ``v`` is not a vertex of ``graph``.
    """
    graph.verify_vertex_exists(v)

    processed: ProcessedVertices[V] = ProcessedVertices()
    vertices: frozenset[V] = frozenset()
    edges: frozenset[E] = frozenset()
    frontier: set[V] = {v}
    depth = 0

    with parallel_map(max_workers) as fan_out:
        while frontier:
            mapper = fan_out if len(frontier) > 1 else map
            partials = mapper(lambda u: _expand(graph, u, processed), frontier)
            level_vertices, level_edges = reduce(union, partials, _EMPTY)

            vertices |= level_vertices
            edges |= level_edges
            frontier = {e.child for e in level_edges if e.child not in processed}
            depth += 1

    logger.debug(
        "Computed induced subgraph",
        vertex=str(v),
        vertex_count=len(vertices),
        edge_count=len(edges),
        depth=depth,
    )
    return Graph(vertices, edges, v)
