"""Module queries over a computed module graph.

Filters here only select from results; they never change how the graph
or a closure is computed.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from maven_modules.core.exceptions import InvalidCoordinateError, UnknownModuleError
from maven_modules.maven.models import MavenGraph, MavenVertex


@dataclass(frozen=True)
class ModuleFilter:
    """Predicate over modules.

    Attributes:
        type: Keep only modules of this type (modules of unknown type pass).
        skip_type: Drop modules of this type.
        skip_tests: Drop modules whose artifactId contains ``test_marker``.
        test_marker: Marker identifying test modules.
    """

    type: str | None = None
    skip_type: str | None = None
    skip_tests: bool = False
    test_marker: str = "-test"

    def matches(self, vertex: MavenVertex) -> bool:
        """Check whether a module passes the filter."""
        if self.type is not None and vertex.type is not None and vertex.type != self.type:
            return False
        if self.skip_type is not None and vertex.type == self.skip_type:
            return False
        if self.skip_tests and self.test_marker in vertex.artifact_id:
            return False
        return True

    def apply(self, vertices: Iterable[MavenVertex]) -> list[MavenVertex]:
        """Keep the matching modules, preserving order."""
        return [v for v in vertices if self.matches(v)]


def resolve_module(graph: MavenGraph, module: str) -> MavenVertex:
    """Find a module by ``groupId:artifactId``.

    Raises:
        InvalidCoordinateError: If ``module`` has no ``:`` separator.
        UnknownModuleError: If no module matches.
    """
    parts = module.split(":")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise InvalidCoordinateError(module)

    group_id, artifact_id = parts[0], parts[1]
    for vertex in graph.vertices:
        if vertex.group_id == group_id and vertex.artifact_id == artifact_id:
            return vertex
    raise UnknownModuleError(module)


def top_level_modules(
    graph: MavenGraph,
    module_filter: ModuleFilter | None = None,
) -> list[MavenVertex]:
    """List modules no other module depends on, sorted by key."""
    module_filter = module_filter or ModuleFilter()
    roots = (v for v in graph.vertices if graph.order_incoming(v) == 0)
    return sorted(module_filter.apply(roots))


def modules_by_source_files(
    graph: MavenGraph,
    module_filter: ModuleFilter | None = None,
) -> list[MavenVertex]:
    """List modules, most source files first."""
    module_filter = module_filter or ModuleFilter()
    return sorted(
        module_filter.apply(graph.vertices),
        key=lambda v: (-v.source_files, v.key),
    )


def modules_by_dependent_count(
    graph: MavenGraph,
    module_filter: ModuleFilter | None = None,
) -> list[tuple[int, MavenVertex]]:
    """List ``(dependent count, module)`` pairs, most depended-on first."""
    module_filter = module_filter or ModuleFilter()
    counted = [(graph.order_incoming(v), v) for v in module_filter.apply(graph.vertices)]
    return sorted(counted, key=lambda pair: (-pair[0], pair[1].key))
