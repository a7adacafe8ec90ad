"""Unit tests for custom exceptions."""

import pytest

from maven_modules.core.exceptions import (
    ConfigurationError,
    DotRenderError,
    GraphError,
    IneligibleCandidateError,
    InvalidCoordinateError,
    InvalidProjectError,
    MavenModulesError,
    ModuleLookupError,
    ParsingError,
    PomParseError,
    RenderError,
    UnknownModuleError,
    VertexNotFoundError,
)


class TestMavenModulesError:
    """Tests for base MavenModulesError."""

    def test_basic_creation(self) -> None:
        """Test basic exception creation."""
        exc = MavenModulesError("Test error")
        assert exc.message == "Test error"
        assert exc.details == {}
        assert exc.cause is None
        assert str(exc) == "Test error"

    def test_with_cause(self) -> None:
        """Test exception with cause."""
        cause = ValueError("Original error")
        exc = MavenModulesError("Test error", cause=cause)
        assert exc.cause is cause

    def test_to_dict(self) -> None:
        """Test conversion to dictionary."""
        result = MavenModulesError("Test error", details={"key": "value"}).to_dict()
        assert result == {
            "error": "MavenModulesError",
            "message": "Test error",
            "details": {"key": "value"},
        }

    def test_to_dict_without_details(self) -> None:
        """Test details are omitted when empty."""
        assert "details" not in MavenModulesError("Test error").to_dict()


class TestGraphErrors:
    """Tests for graph errors."""

    def test_vertex_not_found(self) -> None:
        """Test VertexNotFoundError."""
        exc = VertexNotFoundError("A")
        assert isinstance(exc, GraphError)
        assert exc.vertex == "A"
        assert exc.details == {"vertex": "A"}
        assert "'A'" in exc.message

    def test_ineligible_candidate(self) -> None:
        """Test IneligibleCandidateError."""
        exc = IneligibleCandidateError("S", ["X", "Y"])
        assert isinstance(exc, GraphError)
        assert exc.message == "S cannot be deleted"
        assert exc.details["dependents"] == ["X", "Y"]


class TestModuleLookupErrors:
    """Tests for module lookup errors."""

    @pytest.mark.parametrize("exc_type", [UnknownModuleError, InvalidCoordinateError])
    def test_hierarchy(self, exc_type: type[ModuleLookupError]) -> None:
        """Test lookup errors share a base."""
        exc = exc_type("core")
        assert isinstance(exc, ModuleLookupError)
        assert exc.details == {"module": "core"}

    def test_unknown_module_message(self) -> None:
        """Test the not-found message."""
        assert UnknownModuleError("g:a").message == "Module not found: g:a"


class TestOtherErrors:
    """Tests for parsing, configuration and rendering errors."""

    def test_pom_parse_error(self) -> None:
        """Test PomParseError."""
        cause = ValueError("bad")
        exc = PomParseError("pom.xml", "bad", cause=cause)
        assert isinstance(exc, ParsingError)
        assert exc.cause is cause
        assert exc.message == "Failed to parse pom.xml: bad"

    def test_invalid_project(self) -> None:
        """Test InvalidProjectError."""
        exc = InvalidProjectError("/tmp/x", "No pom.xml found")
        assert isinstance(exc, ParsingError)
        assert exc.details["path"] == "/tmp/x"

    def test_dot_render_error(self) -> None:
        """Test DotRenderError."""
        exc = DotRenderError("g.dot", 1)
        assert isinstance(exc, RenderError)
        assert exc.details == {"dot_file": "g.dot", "returncode": 1}

    def test_configuration_error(self) -> None:
        """Test ConfigurationError is a MavenModulesError."""
        assert isinstance(ConfigurationError("x"), MavenModulesError)
