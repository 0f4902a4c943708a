"""Locate the Router named on the command line."""

import importlib

from routekit.errors import ConfigurationError
from routekit.router import Router


def resolve_router(target: str) -> Router:
    """Load the ``Router`` named by a ``"module:attribute"`` target.

    The attribute may be a ``Router`` or a zero-argument callable that
    builds one. Exceptions raised by such a factory propagate as-is.

    Raises ``ConfigurationError`` for a malformed target or anything
    that does not end up a ``Router``; import and lookup failures
    surface as ``ModuleNotFoundError`` / ``AttributeError``.
    """
    module_path, sep, attr_name = target.partition(":")
    if not (sep and module_path and attr_name):
        msg = f"Expected a 'module:attribute' target, got {target!r}"
        raise ConfigurationError(msg)

    found = getattr(importlib.import_module(module_path), attr_name)
    router = found if isinstance(found, Router) or not callable(found) else found()

    if not isinstance(router, Router):
        what = "returned" if router is not found else "is"
        msg = f"{target} {what} {type(router).__name__}, expected a Router"
        raise ConfigurationError(msg)
    return router
