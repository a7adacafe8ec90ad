"""Tests for Maven domain models."""

from maven_modules.maven import MavenCoordinate, MavenEdge, MavenVertex


def vertex(artifact_id: str, **attributes: object) -> MavenVertex:
    return MavenCoordinate("com.example", artifact_id, **attributes).to_vertex()  # type: ignore[arg-type]


class TestMavenCoordinate:
    """Tests for MavenCoordinate."""

    def test_key(self) -> None:
        """Test the module key."""
        assert MavenCoordinate("com.example", "core", "1.0").key == "com.example:core"

    def test_to_vertex(self) -> None:
        """Test vertex conversion keeps the coordinate."""
        coordinate = MavenCoordinate("com.example", "core", type="jar", source_files=3)
        v = coordinate.to_vertex()
        assert v.group_id == "com.example"
        assert v.artifact_id == "core"
        assert v.coordinate is coordinate
        assert v.type == "jar"
        assert v.source_files == 3

    def test_to_dict(self) -> None:
        """Test conversion to dictionary."""
        data = MavenCoordinate("g", "a", "1", "test", "jar", 2).to_dict()
        assert data == {
            "group_id": "g",
            "artifact_id": "a",
            "version": "1",
            "scope": "test",
            "type": "jar",
            "source_files": 2,
        }


class TestMavenVertex:
    """Tests for MavenVertex identity."""

    def test_equality_ignores_attributes(self) -> None:
        """Test vertices with the same key are the same module."""
        as_module = vertex("core", version="1.0", type="jar", source_files=12)
        as_dependency = vertex("core", version="${project.version}", scope="test")
        assert as_module == as_dependency
        assert hash(as_module) == hash(as_dependency)
        assert len({as_module, as_dependency}) == 1

    def test_different_keys_differ(self) -> None:
        """Test different artifacts are different modules."""
        assert vertex("core") != vertex("api")
        assert MavenCoordinate("a", "core").to_vertex() != MavenCoordinate("b", "core").to_vertex()

    def test_ordering_by_key(self) -> None:
        """Test vertices sort by groupId then artifactId."""
        vertices = [vertex("web"), MavenCoordinate("com.acme", "zeta").to_vertex(), vertex("api")]
        assert [v.key for v in sorted(vertices)] == [
            "com.acme:zeta",
            "com.example:api",
            "com.example:web",
        ]

    def test_str_includes_type(self) -> None:
        """Test the printed form."""
        assert str(vertex("web", type="war")) == "com.example:web:war"
        assert str(vertex("web")) == "com.example:web:None"

    def test_not_equal_to_other_types(self) -> None:
        """Test comparison with unrelated objects."""
        assert vertex("core") != "com.example:core"


class TestMavenEdge:
    """Tests for MavenEdge."""

    def test_edges_collapse_by_key(self) -> None:
        """Test edges between the same modules are equal."""
        first = MavenEdge(vertex("web", type="war"), vertex("core"))
        second = MavenEdge(vertex("web"), vertex("core", version="2.0"))
        assert first == second
        assert len({first, second}) == 1

    def test_str(self) -> None:
        """Test string representation."""
        assert str(MavenEdge(vertex("web"), vertex("core"))) == "com.example:web -> com.example:core"
