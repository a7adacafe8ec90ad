"""Pytest configuration and shared fixtures.

This module provides fixtures used across all test modules.
"""

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from maven_modules.graph import Graph, SimpleEdge

# Set test environment before importing app modules
os.environ["APP_ENV"] = "development"

POM_NAMESPACE = 'xmlns="http://maven.apache.org/POM/4.0.0"'


def make_graph(edges: list[tuple[str, str]], vertices: list[str] | None = None, root: str = "A") -> Graph:
    """Build a string graph from ``(parent, child)`` pairs."""
    all_vertices = set(vertices or [])
    for parent, child in edges:
        all_vertices.update((parent, child))
    return Graph(all_vertices, {SimpleEdge(p, c) for p, c in edges}, root)


def write_pom(directory: Path, body: str, namespaced: bool = True) -> Path:
    """Write a ``pom.xml`` with the given project body."""
    directory.mkdir(parents=True, exist_ok=True)
    ns = f" {POM_NAMESPACE}" if namespaced else ""
    pom = directory / "pom.xml"
    pom.write_text(
        f'<?xml version="1.0" encoding="UTF-8"?>\n<project{ns}>\n{body}\n</project>\n',
        encoding="utf-8",
    )
    return pom


PARENT = """
    <parent>
        <groupId>com.example</groupId>
        <artifactId>parent</artifactId>
        <version>1.0</version>
    </parent>
"""


def dependency(group_id: str, artifact_id: str, version: str | None = None) -> str:
    """Render a ``<dependency>`` element."""
    version_tag = f"<version>{version}</version>" if version else ""
    return (
        f"<dependency><groupId>{group_id}</groupId>"
        f"<artifactId>{artifact_id}</artifactId>{version_tag}</dependency>"
    )


def module_body(artifact_id: str, dependencies: list[str], packaging: str | None = None) -> str:
    """Render a sub-module project body inheriting from com.example:parent."""
    packaging_tag = f"<packaging>{packaging}</packaging>" if packaging else ""
    return (
        f"{PARENT}<artifactId>{artifact_id}</artifactId>{packaging_tag}"
        f"<dependencies>{''.join(dependencies)}</dependencies>"
    )


@pytest.fixture
def diamond_graph() -> Graph:
    """A -> B, A -> C, B -> D, C -> D."""
    return make_graph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])


@pytest.fixture
def shared_dependency_graph() -> Graph:
    """X -> S <- Y, with X and Y both top-level."""
    return make_graph([("X", "S"), ("Y", "S")], root="X")


@pytest.fixture
def maven_project(tmp_path: Path) -> Path:
    """Create a small multi-module Maven project.

    Module dependencies::

        parent (pom)
        core            <- api, web, tools, legacy-lib
        api  -> core
        web  -> api, core      (war)
        app-test -> web
        tools -> core
        legacy -> legacy-lib -> core
    """
    root = tmp_path / "project"
    write_pom(
        root,
        "<groupId>com.example</groupId><artifactId>parent</artifactId>"
        "<version>1.0</version><packaging>pom</packaging>",
    )
    write_pom(
        root / "core",
        module_body("core", [dependency("org.apache.commons", "commons-lang3", "3.14.0")]),
    )
    for name in ("A.java", "B.java"):
        source = root / "core" / "src" / "main" / "java" / name
        source.parent.mkdir(parents=True, exist_ok=True)
        source.write_text("class X {}\n", encoding="utf-8")
    (root / "core" / "src" / "test").mkdir(parents=True)
    (root / "core" / "src" / "test" / "ATest.java").write_text("class T {}\n", encoding="utf-8")

    write_pom(
        root / "api",
        module_body("api", [dependency("${project.groupId}", "core", "${project.version}")]),
        namespaced=False,
    )
    (root / "api" / "src" / "main").mkdir(parents=True)
    (root / "api" / "src" / "main" / "Api.java").write_text("class Api {}\n", encoding="utf-8")

    write_pom(
        root / "web",
        module_body(
            "web",
            [dependency("com.example", "api"), dependency("${project.parent.groupId}", "core")],
            packaging="war",
        ),
    )
    write_pom(root / "app-test", module_body("app-test", [dependency("com.example", "web")]))
    write_pom(root / "tools", module_body("tools", [dependency("com.example", "core")]))
    write_pom(root / "legacy", module_body("legacy", [dependency("com.example", "legacy-lib")]))
    write_pom(
        root / "legacy" / "legacy-lib",
        module_body("legacy-lib", [dependency("com.example", "core")]),
    )
    # Not a module: no pom.xml
    (root / "docs").mkdir()
    return root


@pytest.fixture
def mock_settings() -> Generator[Any, None, None]:
    """Provide settings with a fresh cache, restored afterwards."""
    with patch.dict(os.environ, {"APP_ENV": "development", "GRAPH_MAX_WORKERS": "4"}):
        from maven_modules.config import get_settings

        get_settings.cache_clear()
        yield get_settings()
        get_settings.cache_clear()


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "slow: Slow tests")
