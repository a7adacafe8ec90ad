"""POM parsing and module discovery.

Reads ``pom.xml`` files into ``MavenPom`` records and walks a project
directory to find every module.
"""

import xml.etree.ElementTree as ET
from collections.abc import Iterator
from pathlib import Path

from maven_modules.config import MavenSettings, get_settings
from maven_modules.core.exceptions import InvalidProjectError, PomParseError
from maven_modules.maven.models import MavenCoordinate, MavenPom
from maven_modules.utils.logging import get_logger

logger = get_logger(__name__)


def _local_name(tag: str) -> str:
    # "{http://maven.apache.org/POM/4.0.0}groupId" -> "groupId"
    return tag.rsplit("}", 1)[-1]


def _try_single(element: ET.Element | None, tag: str) -> ET.Element | None:
    """Get the only child named ``tag``; None when absent or repeated."""
    if element is None:
        return None
    matches = [child for child in element if _local_name(child.tag) == tag]
    return matches[0] if len(matches) == 1 else None


def _try_text(element: ET.Element | None, tag: str) -> str | None:
    child = _try_single(element, tag)
    if child is None:
        return None
    return "".join(child.itertext()).strip()


def _text(element: ET.Element, tag: str, pom_path: str) -> str:
    value = _try_text(element, tag)
    if value is None:
        raise PomParseError(pom_path, f"expected a single <{tag}> in <{_local_name(element.tag)}>")
    return value


def _try_type(element: ET.Element | None) -> str | None:
    value = _try_text(element, "type")
    return value if value is not None else _try_text(element, "packaging")


def _substitute(value: str, placeholders: dict[str, str | None]) -> str:
    for placeholder, replacement in placeholders.items():
        value = value.replace(placeholder, replacement or "")
    return value


def parse_coordinate(element: ET.Element, pom_path: str, source_files: int = 0) -> MavenCoordinate:
    """Read a coordinate whose groupId and artifactId are mandatory."""
    return MavenCoordinate(
        group_id=_text(element, "groupId", pom_path),
        artifact_id=_text(element, "artifactId", pom_path),
        version=_try_text(element, "version"),
        scope=_try_text(element, "scope"),
        type=_try_type(element),
        source_files=source_files,
    )


def _project_coordinate(
    project: ET.Element,
    parent: MavenCoordinate | None,
    pom_path: str,
    source_files: int,
) -> MavenCoordinate:
    if parent is None:
        return parse_coordinate(project, pom_path, source_files)

    group_id = _try_text(project, "groupId")
    artifact_id = _try_text(project, "artifactId")
    version = _try_text(project, "version")
    return MavenCoordinate(
        group_id=group_id if group_id is not None else parent.group_id,
        artifact_id=artifact_id if artifact_id is not None else parent.artifact_id,
        version=version if version is not None else parent.version,
        scope=_try_text(project, "scope"),
        type=_try_type(project),
        source_files=source_files,
    )


def _dependency_coordinate(
    element: ET.Element,
    parent: MavenCoordinate | None,
    project: MavenCoordinate,
    pom_path: str,
) -> MavenCoordinate:
    group_id = _substitute(
        _text(element, "groupId", pom_path),
        {
            "${project.groupId}": project.group_id,
            "${project.parent.groupId}": parent.group_id if parent else None,
        },
    )
    artifact_id = _substitute(
        _text(element, "artifactId", pom_path),
        {
            "${project.artifactId}": project.artifact_id,
            "${project.parent.artifactId}": parent.artifact_id if parent else None,
        },
    )
    version = _try_text(element, "version")
    if version is not None:
        version = _substitute(
            version,
            {
                "${project.version}": project.version,
                "${project.parent.version}": parent.version if parent else None,
            },
        )
    return MavenCoordinate(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        scope=_try_text(element, "scope"),
        type=_try_type(element),
    )


def parse_pom_document(
    root: ET.Element,
    pom_path: str = "<memory>",
    source_files: int = 0,
    default_packaging: str = "jar",
) -> MavenPom:
    """Build a MavenPom from a parsed ``<project>`` element.

    Args:
        root: The document element.
        pom_path: Path used in error messages.
        source_files: Source file count of the module.
        default_packaging: Type assumed when the project declares none.

    Returns:
        The parsed POM.

    Raises:
        PomParseError: If a mandatory element is missing.
    """
    parent_element = _try_single(root, "parent")
    parent = (
        parse_coordinate(parent_element, pom_path, source_files)
        if parent_element is not None
        else None
    )
    coordinate = _project_coordinate(root, parent, pom_path, source_files)

    dependencies_element = _try_single(root, "dependencies")
    dependencies = [
        _dependency_coordinate(element, parent, coordinate, pom_path)
        for element in (dependencies_element if dependencies_element is not None else [])
        if _local_name(element.tag) == "dependency"
    ]

    if coordinate.type is None:
        coordinate = MavenCoordinate(
            group_id=coordinate.group_id,
            artifact_id=coordinate.artifact_id,
            version=coordinate.version,
            scope=coordinate.scope,
            type=default_packaging,
            source_files=coordinate.source_files,
        )
    return MavenPom(parent=parent, coordinate=coordinate, dependencies=dependencies)


def count_source_files(module_dir: Path, source_dir: str = "src/main") -> int:
    """Count regular files below ``module_dir/source_dir``."""
    sources = module_dir / source_dir
    if not sources.is_dir():
        return 0
    return sum(1 for path in sources.rglob("*") if path.is_file())


def parse_pom(pom_file: Path, settings: MavenSettings | None = None) -> MavenPom:
    """Parse a ``pom.xml`` file.

    Args:
        pom_file: Path to the POM.
        settings: Maven settings; defaults to the application settings.

    Returns:
        The parsed POM, with the module's source file count.

    Raises:
        PomParseError: If the file cannot be read or is not a valid POM.
    """
    settings = settings or get_settings().maven
    try:
        tree = ET.parse(pom_file)
    except (ET.ParseError, OSError) as e:
        raise PomParseError(str(pom_file), str(e), cause=e) from e

    source_files = count_source_files(pom_file.parent, settings.source_dir)
    pom = parse_pom_document(
        tree.getroot(),
        pom_path=str(pom_file),
        source_files=source_files,
        default_packaging=settings.default_packaging,
    )
    logger.debug(
        "Parsed pom",
        file_path=str(pom_file),
        module=pom.coordinate.key,
        dependency_count=len(pom.dependencies),
        source_files=source_files,
    )
    return pom


def discover_poms(directory: Path, pom_filename: str = "pom.xml") -> Iterator[Path]:
    """Yield module POMs below ``directory``, children before parents.

    Only subdirectories holding a POM are descended into. The last path
    yielded is ``directory``'s own POM.
    """
    for child in sorted(p for p in directory.iterdir() if p.is_dir()):
        if (child / pom_filename).is_file():
            yield from discover_poms(child, pom_filename)
    yield directory / pom_filename


def parse_dir(directory: Path, settings: MavenSettings | None = None) -> list[MavenPom]:
    """Parse every module of a Maven project.

    A sub-module POM that fails to parse is logged and skipped; the
    project's own POM must parse.

    Args:
        directory: Project root holding the top-level ``pom.xml``.
        settings: Maven settings; defaults to the application settings.

    Returns:
        POMs in discovery order, the project POM last.

    Raises:
        InvalidProjectError: If ``directory`` holds no POM.
        PomParseError: If the project POM is invalid.
    """
    settings = settings or get_settings().maven
    directory = Path(directory)
    root_pom = directory / settings.pom_filename
    if not directory.is_dir() or not root_pom.is_file():
        raise InvalidProjectError(str(directory), f"No {settings.pom_filename} found")

    poms: list[MavenPom] = []
    for pom_file in discover_poms(directory, settings.pom_filename):
        if pom_file == root_pom:
            poms.append(parse_pom(pom_file, settings))
            continue
        try:
            poms.append(parse_pom(pom_file, settings))
        except PomParseError as e:
            logger.warning("Skipping module", file_path=str(pom_file), error=e.message)

    logger.info("Parsed project", directory=str(directory), module_count=len(poms))
    return poms
