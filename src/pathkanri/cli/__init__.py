"""pathkanri CLI — routes-module scaffolding and path lookup.

Entry point registered as ``pathkanri`` in ``pyproject.toml``::

    [project.scripts]
    pathkanri = "pathkanri.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``pathkanri`` command."""
    parser = argparse.ArgumentParser(
        prog="pathkanri",
        description="pathkanri — build URL paths from named route templates.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- pathkanri init ---------------------------------------------------
    init_parser = subparsers.add_parser("init", help="Create a routes module from the stub")
    init_parser.add_argument(
        "directory",
        nargs="?",
        default="paths",
        help="Directory to write routes.py into (default: paths)",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing routes.py",
    )

    # -- pathkanri routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes of a registry")
    routes_parser.add_argument(
        "registry",
        help="Import string (e.g. paths.routes:registry)",
    )

    # -- pathkanri path ---------------------------------------------------
    path_parser = subparsers.add_parser("path", help="Build the path for a named route")
    path_parser.add_argument(
        "registry",
        help="Import string (e.g. paths.routes:registry)",
    )
    path_parser.add_argument("name", help="Route name")
    path_parser.add_argument(
        "-p",
        "--param",
        action="append",
        metavar="KEY=VALUE",
        help="Path parameter (repeatable)",
    )
    path_parser.add_argument(
        "-q",
        "--query",
        action="append",
        metavar="KEY=VALUE",
        help="Query parameter (repeatable)",
    )
    path_parser.add_argument(
        "--full",
        action="store_true",
        help="Prefix the path with the registry's base URL",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "init":
        from pathkanri.cli._init import create_routes_module

        create_routes_module(args)
    elif args.command == "routes":
        from pathkanri.cli._routes import run_routes

        run_routes(args)
    elif args.command == "path":
        from pathkanri.cli._path import run_path

        run_path(args)
