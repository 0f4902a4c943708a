"""Tests for routekit.routing.normalize — path specifier validation."""

import re

import pytest

from routekit.errors import InvalidPathError, MissingHandlerError
from routekit.routing.normalize import is_pattern, normalize, to_matcher
from routekit.routing.route import LiteralPath, NamedPath, PatternPath


def _handler(req: object, res: object, next: object) -> None:
    pass


class _Matcher:
    """Duck-typed pattern: anything with a callable match()."""

    def match(self, path: str) -> bool:
        return path.startswith("/x")


class TestIsPattern:
    def test_compiled_regex(self) -> None:
        assert is_pattern(re.compile(r"^/a"))

    def test_duck_typed(self) -> None:
        assert is_pattern(_Matcher())

    def test_string_is_not_pattern(self) -> None:
        assert not is_pattern("/a")

    def test_non_callable_match(self) -> None:
        class Fake:
            match = "nope"

        assert not is_pattern(Fake())


class TestToMatcher:
    def test_string(self) -> None:
        assert to_matcher("/hello") == LiteralPath("/hello")

    def test_string_is_rooted(self) -> None:
        assert to_matcher("test") == LiteralPath("/test")

    def test_empty_string_is_root(self) -> None:
        assert to_matcher("") == LiteralPath("/")

    def test_pattern(self) -> None:
        expr = re.compile(r"^/([a-zA-Z0-9_\.~-]+)/(.*)")
        assert to_matcher(expr) == PatternPath(expr)

    def test_named(self) -> None:
        assert to_matcher({"name": "hello", "path": "/hello"}) == NamedPath(
            "/hello", name="hello"
        )

    def test_versioned(self) -> None:
        assert to_matcher({"path": "/hello", "version": "1.0.0"}) == NamedPath(
            "/hello", version="1.0.0"
        )

    def test_version_list(self) -> None:
        matcher = to_matcher({"path": "/hello", "version": ["1.0.0", "1.1.0"]})
        assert matcher == NamedPath("/hello", version=("1.0.0", "1.1.0"))

    def test_descriptor_path_is_rooted(self) -> None:
        assert to_matcher({"path": "hello", "name": "h"}) == NamedPath("/hello", name="h")

    def test_bare_descriptor_collapses_to_literal(self) -> None:
        assert to_matcher({"path": "/hello"}) == LiteralPath("/hello")

    def test_bare_descriptor_with_pattern(self) -> None:
        expr = re.compile(r"^/a")
        assert to_matcher({"path": expr}) == PatternPath(expr)

    def test_descriptor_wrapping_pattern(self) -> None:
        expr = re.compile(r"^/a")
        matcher = to_matcher({"path": expr, "version": "1.0.0"})
        assert isinstance(matcher, NamedPath)
        assert matcher.path is expr

    @pytest.mark.parametrize("raw", [True, None, 42, 1.5, b"/bytes", ["/a"], object()])
    def test_rejects_other_shapes(self, raw: object) -> None:
        with pytest.raises(InvalidPathError, match=r"path \(string\) required"):
            to_matcher(raw)

    @pytest.mark.parametrize("descriptor", [{}, {"name": "x"}, {"path": 5}, {"path": None}])
    def test_rejects_descriptor_without_valid_path(self, descriptor: dict) -> None:
        with pytest.raises(InvalidPathError, match=r"path \(string\) required"):
            to_matcher(descriptor)

    def test_rejects_non_string_name(self) -> None:
        with pytest.raises(InvalidPathError, match=r"name \(string\) required"):
            to_matcher({"path": "/a", "name": 3})

    @pytest.mark.parametrize("version", [1, [], [1, 2], {"v": "1"}])
    def test_rejects_bad_version(self, version: object) -> None:
        with pytest.raises(InvalidPathError, match=r"version \(string\) required"):
            to_matcher({"path": "/a", "version": version})


class TestNormalize:
    def test_builds_spec(self) -> None:
        spec = normalize("GET", "/hello", _handler)
        assert spec.method == "GET"
        assert spec.matcher == LiteralPath("/hello")

    def test_method_is_uppercased(self) -> None:
        assert normalize("patch", "/a", _handler).method == "PATCH"

    def test_missing_handler(self) -> None:
        with pytest.raises(MissingHandlerError, match=r"handler \(function\) required"):
            normalize("GET", "/test", None)

    def test_non_callable_handler(self) -> None:
        with pytest.raises(MissingHandlerError):
            normalize("GET", "/test", "not a function")

    def test_path_checked_before_handler(self) -> None:
        with pytest.raises(InvalidPathError):
            normalize("GET", True, None)

    def test_handler_checked_before_method(self) -> None:
        with pytest.raises(MissingHandlerError):
            normalize("TRACE", "/a", None)

    def test_unknown_method(self) -> None:
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            normalize("TRACE", "/a", _handler)

    def test_callable_object_handler(self) -> None:
        class Handler:
            def __call__(self, req: object, res: object, next: object) -> None:
                pass

        assert normalize("GET", "/a", Handler()).method == "GET"
