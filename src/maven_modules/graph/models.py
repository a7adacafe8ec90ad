"""Graph models shared by the graph engine and its consumers.

Defines the edge capability contract, the type variables the generic
graph is parameterized over, and the statistics record.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Edge(Protocol):
    """A directed edge: ``parent`` depends on ``child``.

    Implementations must be hashable and compare by their
    ``(parent, child)`` pair so that duplicate edges collapse in a set.
    """

    @property
    def parent(self) -> Any: ...

    @property
    def child(self) -> Any: ...


V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Edge)


@dataclass(frozen=True)
class SimpleEdge:
    """Plain value edge for graphs over arbitrary hashable vertices.

    Attributes:
        parent: The depending vertex.
        child: The vertex depended upon.
    """

    parent: Any
    child: Any

    def __str__(self) -> str:
        return f"{self.parent} -> {self.child}"


@dataclass(frozen=True)
class GraphStats:
    """Statistics about a graph.

    Attributes:
        vertex_count: Total number of vertices.
        edge_count: Total number of edges.
        root_count: Vertices without incoming edges.
        leaf_count: Vertices without outgoing edges.
    """

    vertex_count: int
    edge_count: int
    root_count: int
    leaf_count: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "root_count": self.root_count,
            "leaf_count": self.leaf_count,
        }
