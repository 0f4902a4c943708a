"""Mount-prefix composition.

Only string paths are ever rewritten. Pattern paths (bare or inside a
descriptor) pass through unchanged and are therefore mounted relative
to the server root whatever prefix was requested: rewriting an
arbitrary pattern to insert a prefix is not generally possible.
"""

import re
from dataclasses import replace

from routekit.routing.route import LiteralPath, NamedPath, PathMatcher

_SLASHES = re.compile(r"/{2,}")


def join_prefix(prefix: str | None, path: str) -> str:
    """Join *prefix* and *path* with exactly one ``/`` between them.

    An empty or missing prefix leaves *path* untouched. The joined
    result is always rooted, and mounting ``/`` yields the bare prefix::

        join_prefix("/hello", "/world")    -> "/hello/world"
        join_prefix("hello/", "world")     -> "/hello/world"
        join_prefix("", "/world")          -> "/world"
        join_prefix("/api/", "/")          -> "/api"
    """
    if not prefix:
        return path
    joined = _SLASHES.sub("/", f"/{prefix}/{path}")
    if len(joined) > 1 and not path.strip("/"):
        return joined.rstrip("/")
    return joined


def compose(prefix: str | None, matcher: PathMatcher) -> PathMatcher:
    """Return the effective matcher for *matcher* mounted under *prefix*."""
    if not prefix:
        return matcher
    if isinstance(matcher, LiteralPath):
        return LiteralPath(join_prefix(prefix, matcher.path))
    if isinstance(matcher, NamedPath) and not matcher.is_pattern:
        return replace(matcher, path=join_prefix(prefix, matcher.path))
    return matcher
