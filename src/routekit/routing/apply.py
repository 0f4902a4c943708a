"""Binding a route table onto an external server.

The server is anything exposing one registration capability per verb,
each called as ``capability(path_or_descriptor, handler)``. Binding is
a single synchronous pass over the table: methods in ``METHODS`` order,
registration order within a method. The table is only read.

Not idempotent: applying the same table twice registers every route
twice. Callers must serialize ``bind_routes()`` per server.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Protocol

from routekit._internal.types import Handler
from routekit.errors import ConfigurationError
from routekit.routing.prefix import compose
from routekit.routing.route import (
    METHODS,
    LiteralPath,
    NamedPath,
    PathMatcher,
    PatternPath,
)
from routekit.routing.table import RouteTable

logger = logging.getLogger("routekit.apply")


@dataclass(frozen=True, slots=True)
class Verb:
    """A verb shortcut name and the HTTP method it registers."""

    name: str
    method: str


# Shortcut name -> method. ``del_`` and ``opts`` are the only mismatches.
VERBS: tuple[Verb, ...] = (
    Verb("get", "GET"),
    Verb("post", "POST"),
    Verb("put", "PUT"),
    Verb("del_", "DELETE"),
    Verb("patch", "PATCH"),
    Verb("head", "HEAD"),
    Verb("opts", "OPTIONS"),
)

# Default server capability per method
SERVER_VERBS: Mapping[str, str] = MappingProxyType({verb.method: verb.name for verb in VERBS})


class RouteTarget(Protocol):
    """Protocol for servers accepted by ``bind_routes()``.

    The server owns version selection among routes sharing a path.
    Servers spelling their capabilities differently can be targeted via
    ``RouterConfig(server_verbs=...)``.
    """

    def get(self, path: Any, handler: Handler, /) -> object: ...
    def post(self, path: Any, handler: Handler, /) -> object: ...
    def put(self, path: Any, handler: Handler, /) -> object: ...
    def del_(self, path: Any, handler: Handler, /) -> object: ...
    def patch(self, path: Any, handler: Handler, /) -> object: ...
    def head(self, path: Any, handler: Handler, /) -> object: ...
    def opts(self, path: Any, handler: Handler, /) -> object: ...


def server_path(matcher: PathMatcher) -> Any:
    """What the server receives for *matcher*.

    Bare string or pattern, or a fresh descriptor dict holding ``path``
    plus whichever of ``name``/``version`` the route carries.
    """
    if isinstance(matcher, LiteralPath):
        return matcher.path
    if isinstance(matcher, PatternPath):
        return matcher.expr
    descriptor: dict[str, Any] = {"path": matcher.path}
    if matcher.name is not None:
        descriptor["name"] = matcher.name
    if matcher.version is not None:
        descriptor["version"] = (
            matcher.version if isinstance(matcher.version, str) else list(matcher.version)
        )
    return descriptor


def _is_pattern_route(matcher: PathMatcher) -> bool:
    return isinstance(matcher, PatternPath) or (
        isinstance(matcher, NamedPath) and matcher.is_pattern
    )


def _capabilities(
    table: RouteTable,
    server: object,
    server_verbs: Mapping[str, str],
) -> dict[str, Callable[..., Any]]:
    capabilities: dict[str, Callable[..., Any]] = {}
    for method in METHODS:
        if not table.routes(method):
            continue
        attr = server_verbs[method]
        capability = getattr(server, attr, None)
        if not callable(capability):
            msg = (
                f"{type(server).__name__} has no {attr}() capability "
                f"for {method} routes."
            )
            raise ConfigurationError(msg)
        capabilities[method] = capability
    return capabilities


def bind_routes(
    table: RouteTable,
    server: object,
    prefix: str | None = "",
    *,
    server_verbs: Mapping[str, str] = SERVER_VERBS,
    strict_patterns: bool = False,
) -> None:
    """Bind every entry of *table* onto *server* under *prefix*.

    Capabilities are resolved (and ``strict_patterns`` checked) before
    the first route is bound. Errors raised by the server itself
    propagate unchanged.

    Raises ``ConfigurationError`` if the server lacks a needed
    capability, or if ``strict_patterns`` is set and a pattern route
    would be applied under a prefix other than ``""`` or ``"/"``.
    """
    capabilities = _capabilities(table, server, server_verbs)

    if prefix and prefix.strip("/"):
        patterns = [entry for entry in table if _is_pattern_route(entry.matcher)]
        if patterns and strict_patterns:
            msg = (
                f"Cannot mount {len(patterns)} pattern route(s) under prefix "
                f"{prefix!r}: pattern paths are never rewritten."
            )
            raise ConfigurationError(msg)
        for entry in patterns:
            logger.warning(
                "Pattern route %s %r ignores prefix %r and is mounted at server root",
                entry.method,
                server_path(entry.matcher),
                prefix,
            )

    for method in METHODS:
        for entry in table.routes(method):
            path = server_path(compose(prefix, entry.matcher))
            capabilities[method](path, entry.handler)
            logger.debug("bound %s %r", method, path)
