"""Custom exceptions for Maven Modules.

This module defines a hierarchy of exceptions used throughout the application
for consistent error handling and reporting.
"""

from typing import Any


class MavenModulesError(Exception):
    """Base exception for all Maven Modules errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for reporting."""
        result: dict[str, Any] = {
            "error": self.__class__.__name__,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(MavenModulesError):
    """Error in application configuration."""

    pass


# =============================================================================
# Graph Errors
# =============================================================================


class GraphError(MavenModulesError):
    """Base class for graph-related errors."""

    pass


class VertexNotFoundError(GraphError):
    """Requested vertex is not part of the graph."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(
            message=f"Vertex '{vertex}' does not exist in graph",
            details={"vertex": str(vertex)},
        )
        self.vertex = vertex


class IneligibleCandidateError(GraphError):
    """Deletion candidate is still depended on by other vertices."""

    def __init__(self, vertex: Any, dependents: list[str]) -> None:
        super().__init__(
            message=f"{vertex} cannot be deleted",
            details={"vertex": str(vertex), "dependents": dependents},
        )
        self.vertex = vertex


# =============================================================================
# Module Lookup Errors
# =============================================================================


class ModuleLookupError(MavenModulesError):
    """Base class for errors resolving a module name."""

    pass


class UnknownModuleError(ModuleLookupError):
    """No module in the project matches the given coordinate."""

    def __init__(self, module: str) -> None:
        super().__init__(
            message=f"Module not found: {module}",
            details={"module": module},
        )


class InvalidCoordinateError(ModuleLookupError):
    """Module name is not of the form 'groupId:artifactId'."""

    def __init__(self, module: str) -> None:
        super().__init__(
            message=f"Invalid module coordinate '{module}', expected groupId:artifactId",
            details={"module": module},
        )


# =============================================================================
# Parsing Errors
# =============================================================================


class ParsingError(MavenModulesError):
    """Base class for parsing-related errors."""

    pass


class PomParseError(ParsingError):
    """Failed to read a build descriptor."""

    def __init__(self, file_path: str, reason: str, cause: Exception | None = None) -> None:
        super().__init__(
            message=f"Failed to parse {file_path}: {reason}",
            details={"file_path": file_path, "reason": reason},
            cause=cause,
        )


class InvalidProjectError(ParsingError):
    """Directory does not hold a Maven project."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(
            message=f"Invalid project: {path}. {reason}",
            details={"path": path, "reason": reason},
        )


# =============================================================================
# Rendering Errors
# =============================================================================


class RenderError(MavenModulesError):
    """Base class for output rendering errors."""

    pass


class DotRenderError(RenderError):
    """Graphviz failed to render a DOT file."""

    def __init__(self, dot_file: str, returncode: int | None, cause: Exception | None = None) -> None:
        super().__init__(
            message=f"Failed to render dot file {dot_file}",
            details={"dot_file": dot_file, "returncode": returncode},
            cause=cause,
        )
