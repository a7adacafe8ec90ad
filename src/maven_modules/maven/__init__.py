"""Maven project model: POM parsing and module graph construction."""

from maven_modules.maven.builder import build_graph, maven_graph, pom_edges
from maven_modules.maven.models import (
    MavenCoordinate,
    MavenEdge,
    MavenGraph,
    MavenPom,
    MavenVertex,
)
from maven_modules.maven.parser import (
    count_source_files,
    discover_poms,
    parse_dir,
    parse_pom,
    parse_pom_document,
)

__all__ = [
    # Models
    "MavenCoordinate",
    "MavenPom",
    "MavenVertex",
    "MavenEdge",
    "MavenGraph",
    # Parser
    "parse_pom",
    "parse_pom_document",
    "parse_dir",
    "discover_poms",
    "count_source_files",
    # Builder
    "build_graph",
    "maven_graph",
    "pom_edges",
]
