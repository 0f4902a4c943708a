"""The route registry.

Declare routes without a server, then apply the whole table to one::

    router = Router()

    def hello(req, res, next): ...

    router.get("/world", hello)
    router.get({"path": "/hello", "version": "1.0.0"}, hello_v1)
    router.get({"path": "/hello", "version": "2.0.0"}, hello_v2)

    router.apply_routes(server, "/hello")   # GET /hello/world -> hello

Each instance owns its own table. Nothing is shared between routers.
"""

import logging
from collections.abc import Callable, Sequence

from routekit._internal.types import Handler, PathSpec
from routekit.config import RouterConfig
from routekit.routing.apply import bind_routes
from routekit.routing.normalize import normalize, to_matcher
from routekit.routing.route import RouteEntry, check_method
from routekit.routing.table import RouteTable

logger = logging.getLogger("routekit.router")


class Router:
    """A table of routes, built independently of any server.

    Registration validates eagerly: a bad path raises
    ``InvalidPathError`` and a missing handler raises
    ``MissingHandlerError``, in that order, before the table changes.
    """

    __slots__ = ("_table", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._table = RouteTable()

    # -- Registration --

    def register(self, method: str, path: PathSpec, handler: Handler | None = None) -> None:
        """Register *handler* for *method* at *path*."""
        spec = normalize(method, path, handler)
        self._table.append(RouteEntry(spec=spec, handler=handler))
        logger.debug("registered %s %r", spec.method, path)

    def get(self, path: PathSpec, handler: Handler | None = None) -> None:
        self.register("GET", path, handler)

    def post(self, path: PathSpec, handler: Handler | None = None) -> None:
        self.register("POST", path, handler)

    def put(self, path: PathSpec, handler: Handler | None = None) -> None:
        self.register("PUT", path, handler)

    def del_(self, path: PathSpec, handler: Handler | None = None) -> None:
        """Register a DELETE route (``del`` is a reserved word)."""
        self.register("DELETE", path, handler)

    def patch(self, path: PathSpec, handler: Handler | None = None) -> None:
        self.register("PATCH", path, handler)

    def head(self, path: PathSpec, handler: Handler | None = None) -> None:
        self.register("HEAD", path, handler)

    def opts(self, path: PathSpec, handler: Handler | None = None) -> None:
        """Register an OPTIONS route."""
        self.register("OPTIONS", path, handler)

    def route(
        self,
        path: PathSpec,
        *,
        methods: Sequence[str] | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Any accepted path specifier. Validated immediately.
            methods: HTTP methods. Defaults to ``["GET"]``.
        """
        to_matcher(path)
        if methods is None:
            verbs = ["GET"]
        elif not methods:
            msg = f"route({path!r}) needs at least one HTTP method"
            raise ValueError(msg)
        else:
            verbs = [check_method(method) for method in methods]

        def decorator(func: Handler) -> Handler:
            for method in verbs:
                self.register(method, path, func)
            return func

        return decorator

    # -- Inspection --

    def get_routes(self, method: str) -> tuple[RouteEntry, ...]:
        """Entries registered for *method*, in registration order."""
        return self._table.routes(method)

    @property
    def routes(self) -> tuple[RouteEntry, ...]:
        """Every entry, grouped by method, in registration order."""
        return tuple(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"Router({self._table!r})"

    # -- Application --

    def apply_routes(self, server: object, prefix: str | None = None) -> None:
        """Bind every registered route onto *server* under *prefix*.

        ``prefix=None`` falls back to ``config.prefix``. String paths
        are joined to the prefix with a single ``/``; pattern paths are
        mounted at server root unchanged. Calling this twice registers
        everything twice.
        """
        if prefix is None:
            prefix = self.config.prefix
        bind_routes(
            self._table,
            server,
            prefix,
            server_verbs=self.config.server_verbs,
            strict_patterns=self.config.strict_patterns,
        )
        logger.debug(
            "applied %d route(s) to %s under %r", len(self._table), type(server).__name__, prefix
        )
