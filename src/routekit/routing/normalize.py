"""Path specifier normalization.

``to_matcher()`` is the single place that looks at the shape of a
caller's path argument. Everything downstream works with the tagged
matcher types from ``routekit.routing.route``.

Accepted shapes::

    "/hello"                                    -> LiteralPath("/hello")
    re.compile(r"^/(\\w+)/(.*)")                -> PatternPath(<pattern>)
    {"path": "/hello", "version": "1.0.0"}      -> NamedPath("/hello", version="1.0.0")
    {"path": "/hello"}                          -> LiteralPath("/hello")
"""

from collections.abc import Mapping, Sequence
from typing import Any

from routekit._internal.types import Handler
from routekit.errors import InvalidPathError, MissingHandlerError
from routekit.routing.route import (
    LiteralPath,
    NamedPath,
    PathMatcher,
    PatternPath,
    RouteSpec,
    check_method,
)


def is_pattern(obj: object) -> bool:
    """True for compiled patterns and anything else exposing ``match()``."""
    if isinstance(obj, (str, bytes)):
        return False
    return callable(getattr(obj, "match", None))


def _rooted(path: str) -> str:
    if path.startswith("/"):
        return path
    return "/" + path


def _descriptor_version(value: Any) -> str | tuple[str, ...] | None:
    if value is None or isinstance(value, str):
        return value
    if (
        isinstance(value, Sequence)
        and value
        and all(isinstance(v, str) for v in value)
    ):
        return tuple(value)
    raise InvalidPathError("version (string) required")


def _from_descriptor(descriptor: Mapping[str, Any]) -> PathMatcher:
    path = descriptor.get("path")
    if isinstance(path, str):
        path = _rooted(path)
    elif not is_pattern(path):
        raise InvalidPathError()

    name = descriptor.get("name")
    if name is not None and not isinstance(name, str):
        raise InvalidPathError("name (string) required")
    version = _descriptor_version(descriptor.get("version"))

    if name is None and version is None:
        # Nothing to carry; behaves exactly like the bare path
        return LiteralPath(path) if isinstance(path, str) else PatternPath(path)
    return NamedPath(path=path, name=name, version=version)


def to_matcher(raw: object) -> PathMatcher:
    """Convert a raw path argument into its matcher.

    Raises ``InvalidPathError`` for anything that is not a string,
    a pattern, or a mapping with a string/pattern ``path``.
    """
    if isinstance(raw, str):
        return LiteralPath(_rooted(raw))
    if isinstance(raw, Mapping):
        return _from_descriptor(raw)
    if is_pattern(raw):
        return PatternPath(raw)
    raise InvalidPathError()


def normalize(method: str, raw: object, handler: Handler | None) -> RouteSpec:
    """Validate one registration call and build its ``RouteSpec``.

    Checks run in a fixed order, all before any side effect:

    1. the path argument (``InvalidPathError``)
    2. the handler (``MissingHandlerError``)
    3. the method (``ValueError``)
    """
    matcher = to_matcher(raw)

    if handler is None or not callable(handler):
        raise MissingHandlerError()

    return RouteSpec(method=check_method(method), matcher=matcher)
