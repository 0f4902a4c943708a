"""Test utilities for routekit routers.

``RecordingServer`` stands in for a real HTTP server: it implements
every verb capability and records each binding in call order::

    from routekit.testing import RecordingServer

    server = RecordingServer()
    router.apply_routes(server, "/hello")
    assert server.paths("GET") == ["/hello/world"]
"""

from dataclasses import dataclass
from typing import Any

from routekit._internal.types import Handler


@dataclass(frozen=True, slots=True)
class BoundRoute:
    """One capability call received by a ``RecordingServer``."""

    method: str
    path: Any
    handler: Handler

    @property
    def version(self) -> Any:
        """The descriptor's version, or ``None`` for bare paths."""
        if isinstance(self.path, dict):
            return self.path.get("version")
        return None


class RecordingServer:
    """In-memory server that records bindings instead of serving them."""

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("bound",)

    def __init__(self) -> None:
        self.bound: list[BoundRoute] = []

    def _record(self, method: str, path: Any, handler: Handler) -> None:
        self.bound.append(BoundRoute(method=method, path=path, handler=handler))

    def get(self, path: Any, handler: Handler, /) -> None:
        self._record("GET", path, handler)

    def post(self, path: Any, handler: Handler, /) -> None:
        self._record("POST", path, handler)

    def put(self, path: Any, handler: Handler, /) -> None:
        self._record("PUT", path, handler)

    def del_(self, path: Any, handler: Handler, /) -> None:
        self._record("DELETE", path, handler)

    def patch(self, path: Any, handler: Handler, /) -> None:
        self._record("PATCH", path, handler)

    def head(self, path: Any, handler: Handler, /) -> None:
        self._record("HEAD", path, handler)

    def opts(self, path: Any, handler: Handler, /) -> None:
        self._record("OPTIONS", path, handler)

    def routes(self, method: str) -> list[BoundRoute]:
        """Bindings received for *method*, in call order."""
        return [route for route in self.bound if route.method == method.upper()]

    def paths(self, method: str) -> list[str]:
        """Effective string paths received for *method*.

        Descriptors contribute their ``path`` value; patterns are
        rendered via their ``pattern`` attribute when present.
        """
        result: list[str] = []
        for route in self.routes(method):
            path = route.path["path"] if isinstance(route.path, dict) else route.path
            result.append(path if isinstance(path, str) else getattr(path, "pattern", repr(path)))
        return result

    def __len__(self) -> int:
        return len(self.bound)
