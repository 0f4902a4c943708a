"""``routekit routes`` — print a router's table as the server would see it.

Paths are shown after prefix composition; pattern routes are marked
``re:`` because they are never prefixed.
"""

import argparse
import sys

from routekit.cli._resolve import resolve_router
from routekit.errors import ConfigurationError
from routekit.routing.prefix import compose
from routekit.routing.route import NamedPath, PathMatcher, PatternPath, RouteEntry

HEADER: tuple[str, ...] = ("METHOD", "PATH", "NAME", "VERSION", "HANDLER")

# Shown for a column the route does not carry
_ABSENT = "-"


def _path_cell(matcher: PathMatcher) -> str:
    path = matcher.expr if isinstance(matcher, PatternPath) else matcher.path
    if isinstance(path, str):
        return path
    return f"re:{getattr(path, 'pattern', path)}"


def _name_cell(matcher: PathMatcher) -> str:
    if isinstance(matcher, NamedPath) and matcher.name:
        return matcher.name
    return _ABSENT


def _version_cell(matcher: PathMatcher) -> str:
    if not isinstance(matcher, NamedPath) or matcher.version is None:
        return _ABSENT
    if isinstance(matcher.version, str):
        return matcher.version
    return ",".join(matcher.version)


def route_row(entry: RouteEntry, prefix: str | None = None) -> tuple[str, ...]:
    """One table row for *entry* mounted under *prefix*."""
    matcher = compose(prefix, entry.matcher)
    return (
        entry.method,
        _path_cell(matcher),
        _name_cell(matcher),
        _version_cell(matcher),
        getattr(entry.handler, "__qualname__", repr(entry.handler)),
    )


def format_routes(entries: list[RouteEntry], prefix: str | None = None) -> list[str]:
    """Render *entries* as a header, a rule, and one aligned line each."""
    rows = [route_row(entry, prefix) for entry in entries]
    widths = [max(map(len, column)) for column in zip(HEADER, *rows, strict=True)]

    def line(cells: tuple[str, ...]) -> str:
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    rule = tuple("-" * width for width in widths)
    return [line(HEADER), line(rule), *(line(row) for row in rows)]


def run_routes(args: argparse.Namespace) -> None:
    """Print the routes of ``args.router`` under ``args.prefix``."""
    try:
        router = resolve_router(args.router)
    except (ModuleNotFoundError, AttributeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not len(router):
        print("No routes registered.")
        return

    prefix = router.config.prefix if args.prefix is None else args.prefix
    print("\n".join(format_routes(list(router.routes), prefix)))
