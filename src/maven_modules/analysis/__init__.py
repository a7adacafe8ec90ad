"""Analyses answering structural questions about a module graph."""

from maven_modules.analysis.deletion import (
    DeletionImpactAnalyzer,
    DeletionReport,
    RejectedCandidate,
    RejectionReason,
    analyze_deletion,
    vertex_resolver,
)
from maven_modules.analysis.queries import (
    ModuleFilter,
    modules_by_dependent_count,
    modules_by_source_files,
    resolve_module,
    top_level_modules,
)

__all__ = [
    # Deletion impact
    "DeletionImpactAnalyzer",
    "DeletionReport",
    "RejectedCandidate",
    "RejectionReason",
    "analyze_deletion",
    "vertex_resolver",
    # Queries
    "ModuleFilter",
    "resolve_module",
    "top_level_modules",
    "modules_by_source_files",
    "modules_by_dependent_count",
]
