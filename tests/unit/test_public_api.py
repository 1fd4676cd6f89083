"""Tests for public API exports in __init__.py."""

import pytest

import url_composer


def test_operations_are_exported():
    """Every public operation is importable from the root package."""
    for name in ("build", "path", "query", "regex", "match", "test", "params", "stats"):
        assert callable(getattr(url_composer, name)), name


def test_path_and_query_aliases():
    """path and query are the assembler's build_path and build_query."""
    from url_composer.core.assembler import build_path, build_query

    assert url_composer.path is build_path
    assert url_composer.query is build_query


def test_core_types_exported():
    """Core types are exported."""
    from url_composer import (
        ArgumentKind,
        Arguments,
        BuildOptions,
        MatchOptions,
        ParamDescriptor,
        ParamsMatch,
        StatsReport,
    )

    for cls in (
        ArgumentKind,
        Arguments,
        BuildOptions,
        MatchOptions,
        ParamDescriptor,
        ParamsMatch,
        StatsReport,
    ):
        assert cls is not None


def test_exceptions_exported():
    """All exceptions are exported and share one base."""
    from url_composer import (
        InvalidArgumentError,
        InvalidOptionsError,
        MissingParameterError,
        PatternCompileError,
        UrlComposerError,
    )

    for exc in (
        InvalidArgumentError,
        InvalidOptionsError,
        MissingParameterError,
        PatternCompileError,
    ):
        assert issubclass(exc, UrlComposerError)


def test_version_is_numeric_release():
    """__version__ is a dotted numeric release string."""
    assert url_composer.__version__.count(".") == 2
    assert all(part.isdigit() for part in url_composer.__version__.split("."))


def test_all_matches_attributes():
    """Every name in __all__ exists on the package."""
    for name in url_composer.__all__:
        assert hasattr(url_composer, name), name


class TestDocumentedBehaviour:
    """The behaviour promised in the package documentation."""

    def test_build_with_host(self):
        url = url_composer.build(
            {"host": "http://a.com/", "path": "/users/:id", "params": {"id": 42}}
        )
        assert url == "http://a.com/users/42"

    def test_build_without_params(self):
        assert url_composer.build({"path": "/users(/:id)"}) == "/users"

    def test_build_with_optional_param(self):
        assert url_composer.build({"path": "/users(/:id)", "params": {"id": 7}}) == "/users/7"

    def test_regex(self):
        compiled = url_composer.regex("/users/:id")
        assert compiled.search("/users/42")
        assert not compiled.search("/users/")

    def test_query(self):
        assert url_composer.query({"query": {"a": 1, "b": "x y"}}) == "a=1&b=x%20y"

    def test_stats_missing_required(self):
        report = url_composer.stats("/users/:id", {})
        assert len(report.params) == 1
        assert report.params[0].value == ""
        assert report.params[0].required is True
        assert len(report.missing_required_params) == 1

    def test_stats_optional(self):
        report = url_composer.stats("/users(/:id)", {"id": 5})
        assert report.params[0].optional is True
        assert report.params[0].value == 5
        assert report.missing_optional_params == []

    def test_match(self):
        assert url_composer.match("/:a/*b").to_dict() == {"named": [":a"], "splat": ["*b"]}

    def test_test(self):
        assert url_composer.test({"path": "/users/:id", "url": "/users/42"})

    def test_params(self):
        assert url_composer.params("/:a/*b", [1, 2]) == {"a": 1, "b": 2}

    @pytest.mark.parametrize(
        "pattern",
        ["/users(/:id)", "/a(/b)/c", "/:a(/*b)(/c/:d)", "", "/static"],
    )
    def test_path_without_arguments_is_idempotent(self, pattern):
        once = url_composer.path(path=pattern)
        assert "(" not in once
        assert url_composer.path(path=once) == once


class TestMalformedPatterns:
    """Unbalanced parentheses degrade to a string instead of raising."""

    def test_unclosed_group_without_params(self):
        assert url_composer.path(path="/a(b") == "/a(b"

    def test_unclosed_group_with_params(self):
        assert url_composer.path(path="/a(b/:c", params=[1]) == "/ab/1"

    def test_unopened_group_without_params(self):
        assert url_composer.path(path="/a)b") == "/a)b"

    def test_build_with_unclosed_group(self):
        url = url_composer.build(host="http://a.com", path="/a(b/:c", params={"c": 2})
        assert url == "http://a.com/ab/2"
