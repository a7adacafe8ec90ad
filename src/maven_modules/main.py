"""Command line entry point for Maven Modules.

Parses the project in ``--directory`` into a module graph and runs one
analysis subcommand on it. Results go to stdout, diagnostics to stderr.
"""

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from maven_modules import __version__
from maven_modules.analysis import (
    ModuleFilter,
    analyze_deletion,
    modules_by_dependent_count,
    modules_by_source_files,
    resolve_module,
    top_level_modules,
)
from maven_modules.config import Settings, load_settings
from maven_modules.core.exceptions import (
    ConfigurationError,
    DotRenderError,
    MavenModulesError,
    ModuleLookupError,
)
from maven_modules.graph import render_dot, to_dot
from maven_modules.maven import MavenGraph, maven_graph
from maven_modules.utils.logging import LogContext, get_logger, setup_logging

logger = get_logger(__name__)

Handler = Callable[[argparse.Namespace, MavenGraph, Settings], int]


def _module_filter(args: argparse.Namespace, settings: Settings) -> ModuleFilter:
    return ModuleFilter(
        type=args.type,
        skip_type=args.skip_type,
        skip_tests=args.skip_tests,
        test_marker=settings.maven.test_marker,
    )


def top_level_modules_command(args: argparse.Namespace, graph: MavenGraph, settings: Settings) -> int:
    """List modules that no other module depends on."""
    for vertex in top_level_modules(graph, _module_filter(args, settings)):
        print(vertex)
    return 0


def module_source_files_command(args: argparse.Namespace, graph: MavenGraph, settings: Settings) -> int:
    """List modules by number of source files."""
    for vertex in modules_by_source_files(graph, _module_filter(args, settings)):
        print(vertex)
    return 0


def module_dependency_count_command(
    args: argparse.Namespace, graph: MavenGraph, settings: Settings
) -> int:
    """List modules by number of dependents."""
    for count, vertex in modules_by_dependent_count(graph, _module_filter(args, settings)):
        print(f"{count} - {vertex}")
    return 0


def delete_modules_command(args: argparse.Namespace, graph: MavenGraph, settings: Settings) -> int:
    """List the modules that can be removed along with the given ones."""
    report = analyze_deletion(graph, args.modules, settings)
    for rejected in report.rejected:
        print(rejected.message, file=sys.stderr)
    for vertex in sorted(report.deletable):
        print(vertex)
    return 0


def subgraph_dot_command(args: argparse.Namespace, graph: MavenGraph, settings: Settings) -> int:
    """Render the dependency closure of a module with Graphviz."""
    try:
        vertex = resolve_module(graph, args.module)
    except ModuleLookupError:
        print(f"Module '{args.module}' not found", file=sys.stderr)
        return 1

    subgraph = graph.induced_subgraph(vertex, max_workers=settings.graph.max_workers)
    dot = to_dot(subgraph)
    try:
        render_dot(dot, args.dot_file, args.output_file, args.image_type)
    except DotRenderError:
        print(f"Failed to generate dot:\n{dot}", file=sys.stderr)
        return 1
    return 0


def _add_filter_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--type", default=None, help="Module types to list (e.g. jar, war, pom).")
    parser.add_argument(
        "--skip-type", default=None, help="Module types to skip (e.g. jar, war, pom)."
    )
    tests = parser.add_mutually_exclusive_group()
    tests.add_argument(
        "--skip-tests",
        dest="skip_tests",
        action="store_true",
        help="Skip test modules (modules with '-test' in the artifactId).",
    )
    tests.add_argument(
        "--with-tests",
        dest="skip_tests",
        action="store_false",
        help="Include test modules (default).",
    )
    parser.set_defaults(skip_tests=False)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="maven-modules",
        description="Analyze the module dependency graph of a Maven project.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--directory",
        type=Path,
        default=Path.cwd(),
        help="Maven project directory (default is current working directory).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true", help="Write debug output to stderr."
    )
    verbosity.add_argument(
        "--quiet", "-q", dest="verbose", action="store_false", help="Only write errors to stderr."
    )
    parser.set_defaults(verbose=False)

    subparsers = parser.add_subparsers(dest="command", required=True)

    top_level = subparsers.add_parser(
        "top-level-modules",
        help="List all top-level modules in the repository. Top-level modules "
        "are modules that are not depended on by other modules in this repository.",
    )
    _add_filter_options(top_level)
    top_level.set_defaults(handler=top_level_modules_command)

    source_files = subparsers.add_parser(
        "module-source-files", help="List all modules sorted by number of source files."
    )
    _add_filter_options(source_files)
    source_files.set_defaults(handler=module_source_files_command)

    dependency_count = subparsers.add_parser(
        "module-dependency-count",
        help="List all modules in the repository sorted by dependency count.",
    )
    _add_filter_options(dependency_count)
    dependency_count.set_defaults(handler=module_dependency_count_command)

    delete = subparsers.add_parser(
        "delete-modules",
        help="Analyze what modules can be removed from the repository when deleting MODULES.",
    )
    delete.add_argument("modules", nargs="+", metavar="MODULE", help="Top-level modules to delete.")
    delete.set_defaults(handler=delete_modules_command)

    subgraph = subparsers.add_parser(
        "subgraph-dot", help="Generate dot graph for MODULE as OUTPUT-FILE."
    )
    subgraph.add_argument("module", metavar="MODULE", help="Module to investigate.")
    subgraph.add_argument("output_file", metavar="OUTPUT-FILE", help="Target file for image.")
    subgraph.add_argument(
        "--image-type", "-t", default="png", help="Image type (default: 'png')."
    )
    subgraph.add_argument(
        "--dot-file",
        "-f",
        default="subgraph.dot",
        help="File name for dot file (default: 'subgraph.dot').",
    )
    subgraph.set_defaults(handler=subgraph_dot_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv``.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else None)
    handler: Handler = args.handler

    with LogContext(command=args.command):
        try:
            graph = maven_graph(args.directory, settings.maven)
            if args.verbose:
                logger.debug("Graph statistics", **graph.stats().to_dict())
            return handler(args, graph, settings)
        except MavenModulesError as e:
            logger.error("Command failed", error=e.__class__.__name__, details=e.details)
            print(f"error: {e.message}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
