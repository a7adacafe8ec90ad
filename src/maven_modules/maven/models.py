"""Maven domain models.

Coordinates and POMs as read from build descriptors, and the vertex and
edge types of the module graph.
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any

from maven_modules.graph.engine import Graph


@dataclass(frozen=True)
class MavenCoordinate:
    """A module or dependency reference.

    Attributes:
        group_id: Maven groupId.
        artifact_id: Maven artifactId.
        version: Declared version, if any.
        scope: Dependency scope, if any.
        type: Declared type or packaging (jar, war, pom, ...).
        source_files: Number of files under the module's source directory.
    """

    group_id: str
    artifact_id: str
    version: str | None = None
    scope: str | None = None
    type: str | None = None
    source_files: int = 0

    @property
    def key(self) -> str:
        """Stable module identity ``groupId:artifactId``."""
        return f"{self.group_id}:{self.artifact_id}"

    def to_vertex(self) -> "MavenVertex":
        """Get the graph vertex for this coordinate."""
        return MavenVertex(self.group_id, self.artifact_id, self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "group_id": self.group_id,
            "artifact_id": self.artifact_id,
            "version": self.version,
            "scope": self.scope,
            "type": self.type,
            "source_files": self.source_files,
        }


@dataclass(frozen=True)
class MavenPom:
    """A parsed build descriptor.

    Attributes:
        parent: Coordinate of the parent POM, if declared.
        coordinate: The module's own coordinate.
        dependencies: Declared dependencies, in document order.
    """

    parent: MavenCoordinate | None
    coordinate: MavenCoordinate
    dependencies: list[MavenCoordinate] = field(default_factory=list)


@total_ordering
@dataclass(frozen=True, eq=False)
class MavenVertex:
    """A module in the dependency graph.

    Two vertices are the same module when groupId and artifactId match,
    whatever their coordinates say about version, type or source files.
    """

    group_id: str
    artifact_id: str
    coordinate: MavenCoordinate

    @property
    def key(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"

    @property
    def type(self) -> str | None:
        return self.coordinate.type

    @property
    def source_files(self) -> int:
        return self.coordinate.source_files

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MavenVertex):
            return NotImplemented
        return (self.group_id, self.artifact_id) == (other.group_id, other.artifact_id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MavenVertex):
            return NotImplemented
        return (self.group_id, self.artifact_id) < (other.group_id, other.artifact_id)

    def __hash__(self) -> int:
        return hash((self.group_id, self.artifact_id))

    def __str__(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.type}"


@dataclass(frozen=True)
class MavenEdge:
    """``parent`` module depends on ``child`` module."""

    parent: MavenVertex
    child: MavenVertex

    def __str__(self) -> str:
        return f"{self.parent.key} -> {self.child.key}"


MavenGraph = Graph[MavenVertex, MavenEdge]
