"""Route value types — path matchers, RouteSpec and RouteEntry.

Every registration is normalized into exactly one of three matcher
shapes, chosen from the shape of the caller's input:

    LiteralPath  ``"/users/:id"``
    PatternPath  ``re.compile(r"^/files/(.*)")``
    NamedPath    ``{"name": "user", "path": "/users/:id", "version": "1.0.0"}``

All of them are frozen. The table stores them; only the external
server ever interprets them.
"""

from dataclasses import dataclass
from typing import Any

from routekit._internal.types import Handler

# Supported HTTP methods, in table order
METHODS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS")


@dataclass(frozen=True, slots=True)
class LiteralPath:
    """A plain string path, always rooted at ``/``."""

    path: str


@dataclass(frozen=True, slots=True)
class PatternPath:
    """A compiled pattern (anything with a callable ``match``).

    Never rewritten: pattern routes are mounted at server root.
    """

    expr: Any


@dataclass(frozen=True, slots=True)
class NamedPath:
    """A descriptor route carrying a name and/or version.

    ``path`` is either a rooted string or a pattern. ``version`` is a
    single version string or a tuple of them.
    """

    path: str | Any
    name: str | None = None
    version: str | tuple[str, ...] | None = None

    @property
    def is_pattern(self) -> bool:
        return not isinstance(self.path, str)


type PathMatcher = LiteralPath | PatternPath | NamedPath


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A normalized (method, matcher) pair."""

    method: str
    matcher: PathMatcher


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A RouteSpec paired with its handler, as stored in the table."""

    spec: RouteSpec
    handler: Handler

    @property
    def method(self) -> str:
        return self.spec.method

    @property
    def matcher(self) -> PathMatcher:
        return self.spec.matcher


def check_method(method: str) -> str:
    """Return *method* upper-cased, or raise ``ValueError`` if unsupported."""
    verb = method.upper()
    if verb not in METHODS:
        msg = f"Unsupported HTTP method {method!r}. Expected one of: {', '.join(METHODS)}"
        raise ValueError(msg)
    return verb
