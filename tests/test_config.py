"""Tests for routekit.config — RouterConfig frozen dataclass."""

import pytest

from routekit.config import RouterConfig
from routekit.errors import ConfigurationError
from routekit.routing.apply import SERVER_VERBS


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()
        assert cfg.prefix == ""
        assert cfg.strict_patterns is False
        assert dict(cfg.server_verbs) == dict(SERVER_VERBS)
        assert cfg.server_verbs["DELETE"] == "del_"
        assert cfg.server_verbs["OPTIONS"] == "opts"

    def test_override(self) -> None:
        cfg = RouterConfig(
            prefix="/api",
            server_verbs={**SERVER_VERBS, "DELETE": "delete", "OPTIONS": "options"},
            strict_patterns=True,
        )
        assert cfg.prefix == "/api"
        assert cfg.server_verbs["DELETE"] == "delete"
        assert cfg.strict_patterns is True

    def test_frozen(self) -> None:
        cfg = RouterConfig()
        with pytest.raises(AttributeError):
            cfg.prefix = "/x"  # type: ignore[misc]

    def test_server_verbs_copied_and_read_only(self) -> None:
        verbs = dict(SERVER_VERBS)
        cfg = RouterConfig(server_verbs=verbs)
        verbs["GET"] = "fetch"
        assert cfg.server_verbs["GET"] == "get"
        with pytest.raises(TypeError):
            cfg.server_verbs["GET"] = "fetch"  # type: ignore[index]

    def test_unknown_method(self) -> None:
        with pytest.raises(ConfigurationError, match="unknown methods: TRACE"):
            RouterConfig(server_verbs={**SERVER_VERBS, "TRACE": "trace"})

    def test_missing_method(self) -> None:
        verbs = {k: v for k, v in SERVER_VERBS.items() if k != "HEAD"}
        with pytest.raises(ConfigurationError, match="missing methods: HEAD"):
            RouterConfig(server_verbs=verbs)

    @pytest.mark.parametrize("attr", ["", "not valid", 3])
    def test_attribute_must_be_identifier(self, attr: object) -> None:
        with pytest.raises(ConfigurationError, match="identifier"):
            RouterConfig(server_verbs={**SERVER_VERBS, "GET": attr})
