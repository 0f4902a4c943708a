"""Routekit CLI — inspect route tables from the command line.

Entry point registered as ``routekit`` in ``pyproject.toml``::

    [project.scripts]
    routekit = "routekit.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routekit`` command."""
    parser = argparse.ArgumentParser(
        prog="routekit",
        description="Routekit — declare HTTP routes now, bind them to a server later.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log registration and binding details",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routekit routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "router",
        help="Router target as module:attribute (e.g. myapi.routes:router)",
    )
    routes_parser.add_argument(
        "--prefix",
        default=None,
        help="Mount prefix to show effective paths under",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from routekit.cli._routes import run_routes

        run_routes(args)
