"""Maven Modules - dependency analysis for multi-module Maven projects.

A command line tool that answers structural questions about a project's
module graph:
- Top-level modules (nothing depends on them)
- Transitive dependency closure of a module
- Deletion impact of a set of top-level modules
"""

__version__ = "0.1.0"
