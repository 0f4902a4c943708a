"""Routekit exception hierarchy.

Shared across the normalizer, table, applier and CLI so every module
raises and catches the same types. Registration errors are raised
before anything reaches the route table.
"""


class RoutekitError(Exception):
    """Base for all routekit-specific errors."""


class ConfigurationError(RoutekitError):
    """Raised when a router or its target server is misconfigured.

    Covers an invalid ``RouterConfig``, a server missing a verb
    capability, and pattern routes applied under a prefix when
    ``strict_patterns`` is enabled.
    """


class InvalidPathError(RoutekitError, TypeError):
    """The path specifier is not a string, pattern, or descriptor with a valid path."""

    def __init__(self, detail: str = "path (string) required") -> None:
        super().__init__(detail)


class MissingHandlerError(RoutekitError, TypeError):
    """The handler is absent or not callable."""

    def __init__(self, detail: str = "handler (function) required") -> None:
        super().__init__(detail)
