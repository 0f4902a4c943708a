"""Routekit — declare HTTP routes now, bind them to a server later.

Build a route table without a server, then apply it under a prefix::

    from routekit import Router

    router = Router()
    router.get("/world", hello)
    router.get({"path": "/hello", "version": "2.0.0"}, hello_v2)

    router.apply_routes(server, "/hello")

Testing helpers::

    from routekit.testing import RecordingServer
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "InvalidPathError",
    "MissingHandlerError",
    "RouteEntry",
    "RouteSpec",
    "RouteTable",
    "RoutekitError",
    "Router",
    "RouterConfig",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "routekit.errors",
    "InvalidPathError": "routekit.errors",
    "MissingHandlerError": "routekit.errors",
    "RouteEntry": "routekit.routing.route",
    "RouteSpec": "routekit.routing.route",
    "RouteTable": "routekit.routing.table",
    "RoutekitError": "routekit.errors",
    "Router": "routekit.router",
    "RouterConfig": "routekit.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routekit`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_name), name)
