"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, validated
on construction, no string-key dict lookups at call sites.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from routekit.errors import ConfigurationError
from routekit.routing.apply import SERVER_VERBS
from routekit.routing.route import METHODS


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(
            prefix="/api",
            server_verbs={**SERVER_VERBS, "DELETE": "delete", "OPTIONS": "options"},
        )
    """

    # Default mount prefix for apply_routes() when none is passed
    prefix: str = ""

    # HTTP method -> name of the server's registration capability
    server_verbs: Mapping[str, str] = field(default_factory=lambda: SERVER_VERBS)

    # Raise instead of mounting pattern routes at server root under a prefix
    strict_patterns: bool = False

    def __post_init__(self) -> None:
        unknown = set(self.server_verbs) - set(METHODS)
        if unknown:
            msg = f"server_verbs has unknown methods: {', '.join(sorted(unknown))}"
            raise ConfigurationError(msg)
        missing = [method for method in METHODS if method not in self.server_verbs]
        if missing:
            msg = f"server_verbs is missing methods: {', '.join(missing)}"
            raise ConfigurationError(msg)
        for method, attr in self.server_verbs.items():
            if not isinstance(attr, str) or not attr.isidentifier():
                msg = f"server_verbs[{method!r}] must be an identifier, got {attr!r}"
                raise ConfigurationError(msg)
        object.__setattr__(self, "server_verbs", MappingProxyType(dict(self.server_verbs)))
