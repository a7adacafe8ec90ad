"""Deletion-impact analysis.

Given top-level modules a user wants to delete, works out which modules
can go with them. Deleting the union of the candidates' closures is not
safe: a module inside a closure may still be needed by a module that
stays. Such modules, and everything they depend on, are kept.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Generic

from maven_modules.analysis.queries import resolve_module
from maven_modules.config import Settings, get_settings
from maven_modules.core.exceptions import (
    IneligibleCandidateError,
    ModuleLookupError,
    UnknownModuleError,
    VertexNotFoundError,
)
from maven_modules.graph.closure import induced_subgraph, parallel_map
from maven_modules.graph.engine import Graph
from maven_modules.graph.models import E, V
from maven_modules.maven.models import MavenGraph, MavenVertex
from maven_modules.utils.logging import get_logger

logger = get_logger(__name__)


class RejectionReason(str, Enum):
    """Why a deletion candidate was not analyzed."""

    NOT_FOUND = "not_found"
    HAS_DEPENDENTS = "has_dependents"


@dataclass(frozen=True)
class RejectedCandidate:
    """A candidate excluded from the analysis.

    Attributes:
        name: The name as requested.
        reason: Why it was excluded.
        message: Human readable diagnostic.
    """

    name: str
    reason: RejectionReason
    message: str


@dataclass
class DeletionReport(Generic[V]):
    """Result of a deletion-impact analysis.

    Attributes:
        candidates: Accepted candidates, in request order.
        rejected: Candidates that were reported and skipped.
        deletable: Vertices that can be removed safely.
    """

    candidates: list[V] = field(default_factory=list)
    rejected: list[RejectedCandidate] = field(default_factory=list)
    deletable: frozenset[V] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "candidates": [str(v) for v in self.candidates],
            "rejected": [
                {"name": r.name, "reason": r.reason.value, "message": r.message}
                for r in self.rejected
            ],
            "deletable": sorted(str(v) for v in self.deletable),
        }


def vertex_resolver(graph: Graph[V, E]) -> Callable[[V], V]:
    """Resolver for graphs whose vertices are their own names."""

    def resolve(name: V) -> V:
        if name not in graph.vertices:
            raise UnknownModuleError(str(name))
        return name

    return resolve


class DeletionImpactAnalyzer(Generic[V, E]):
    """Computes which vertices can be deleted together with a set of candidates."""

    def __init__(
        self,
        graph: Graph[V, E],
        resolver: Callable[[Any], V],
        max_workers: int | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            graph: The full, undeleted graph.
            resolver: Maps a requested name to a vertex; raises
                ModuleLookupError when it cannot.
            max_workers: Worker threads for closure computations.
        """
        self.graph = graph
        self.resolver = resolver
        self.max_workers = max_workers

    def check_eligible(self, v: V) -> None:
        """Check that nothing depends on ``v``.

        Raises:
            IneligibleCandidateError: If ``v`` has incoming edges.
        """
        if self.graph.order_incoming(v) != 0:
            dependents = sorted(str(p) for p in self.graph.parents_of_vertex(v))
            raise IneligibleCandidateError(v, dependents)

    def analyze(self, names: Iterable[Any]) -> DeletionReport[V]:
        """Resolve, filter and analyze deletion candidates.

        Unknown names and candidates with dependents are reported and
        skipped; the remaining candidates are still analyzed.

        Args:
            names: Requested candidates.

        Returns:
            The report.
        """
        report: DeletionReport[V] = DeletionReport()

        for name in names:
            try:
                v = self.resolver(name)
                self.graph.verify_vertex_exists(v)
            except (ModuleLookupError, VertexNotFoundError) as e:
                logger.info("Rejected deletion candidate", candidate=str(name), error=e.message)
                report.rejected.append(
                    RejectedCandidate(str(name), RejectionReason.NOT_FOUND, e.message)
                )
                continue

            try:
                self.check_eligible(v)
            except IneligibleCandidateError as e:
                logger.info(
                    "Rejected deletion candidate",
                    candidate=str(name),
                    dependents=e.details["dependents"],
                )
                report.rejected.append(
                    RejectedCandidate(str(name), RejectionReason.HAS_DEPENDENTS, e.message)
                )
                continue

            if v not in report.candidates:
                report.candidates.append(v)

        report.deletable = self.deletable(report.candidates)
        return report

    def deletable(self, candidates: Iterable[V]) -> frozenset[V]:
        """Compute the vertices that can be deleted with ``candidates``.

        Candidates are assumed to be eligible.

        Args:
            candidates: Vertices to delete.

        Returns:
            The union of the candidates' closures minus the closure of
            every vertex still depended on from outside that union.
        """
        candidates = list(dict.fromkeys(candidates))
        if not candidates:
            return frozenset()

        in_closure = self._closures(candidates)
        rest = self.graph.vertices - in_closure
        boundary = [e for e in self.graph.edges if e.parent in rest and e.child in in_closure]
        still_needed = list({e.child for e in boundary})

        retained = self._closures(still_needed)
        deletable = in_closure - retained

        logger.debug(
            "Computed deletion impact",
            candidate_count=len(candidates),
            closure_size=len(in_closure),
            boundary_edges=len(boundary),
            retained=len(retained & in_closure),
            deletable=len(deletable),
        )
        return deletable

    def _closures(self, vertices: list[V]) -> frozenset[V]:
        """Union of the closure vertex sets of ``vertices``.

        Several closures run side by side with sequential traversals; a
        single closure gets the workers for its own traversal.
        """
        if not vertices:
            return frozenset()
        if len(vertices) == 1:
            return induced_subgraph(self.graph, vertices[0], self.max_workers).vertices

        with parallel_map(self.max_workers) as fan_out:
            return frozenset().union(*fan_out(self._closure_vertices, vertices))

    def _closure_vertices(self, v: V) -> frozenset[V]:
        return induced_subgraph(self.graph, v).vertices


def analyze_deletion(
    graph: MavenGraph,
    modules: Iterable[str],
    settings: Settings | None = None,
) -> DeletionReport[MavenVertex]:
    """Analyze deleting top-level modules given as ``groupId:artifactId``.

    Args:
        graph: The project's module graph.
        modules: Modules to delete.
        settings: Application settings; defaults to the cached settings.

    Returns:
        The deletion report.
    """
    settings = settings or get_settings()
    analyzer = DeletionImpactAnalyzer(
        graph,
        partial(resolve_module, graph),
        max_workers=settings.graph.max_workers,
    )
    return analyzer.analyze(modules)
