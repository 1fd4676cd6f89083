"""URL assembly from host, path pattern, arguments, query and hash.

Composes the argument injector and the query builder, then glues the
parts together adding each separator only when its part is non-empty.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, TypeVar

from url_composer.core.compiler import regex
from url_composer.core.injector import parse, remove_trailing_slash
from url_composer.core.query import render_query
from url_composer.core.tokens import LEADING_SLASH
from url_composer.exceptions import InvalidOptionsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildOptions:
    """Description of a URL to build.

    Every field is optional; default options build the empty string.
    """

    host: str = ""
    path: str = ""
    params: Any = None
    query: Mapping[str, Any] | None = None
    hash: str = ""


@dataclass(frozen=True)
class MatchOptions:
    """A path pattern and the URL to test against it."""

    path: str = ""
    url: str = ""


_Options = TypeVar("_Options", BuildOptions, MatchOptions)


def coerce_options(
    cls: type[_Options],
    options: Any,
    overrides: dict[str, Any],
    operation: str,
) -> _Options:
    """Turn an options dataclass, a mapping, or keywords into ``cls``.

    Raises:
        InvalidOptionsError: If options has an unsupported type or any
            key is not a field of ``cls``.
    """
    supplied: dict[str, Any] = {}
    if options is None:
        base = cls()
    elif isinstance(options, cls):
        base = options
    elif isinstance(options, Mapping):
        supplied = dict(options)
        base = cls()
    else:
        raise InvalidOptionsError(
            f"Options for {operation} must be a mapping or {cls.__name__}, "
            f"got {type(options).__name__}"
        )

    known = {f.name for f in fields(cls)}
    unknown = sorted({str(key) for key in (*supplied, *overrides) if key not in known})
    if unknown:
        raise InvalidOptionsError(f"Unknown option(s) for {operation}: {unknown}")

    # None means "not given" for every field, keywords win over the mapping
    given = {
        key: value
        for layer in (supplied, overrides)
        for key, value in layer.items()
        if value is not None
    }
    return replace(base, **given) if given else base


def smart_concat(host: str, path: str, query: str, hash: str) -> str:
    """Concatenate URL parts, adding "/", "?" and "#" only where needed.

    Examples:
        ("http://a.com/", "/users/", "", "") -> "http://a.com/users"
        ("", "users", "a=1", "top") -> "/users?a=1#top"
        ("http://a.com", "", "", "") -> "http://a.com"
    """
    host = remove_trailing_slash(host or "")
    path = remove_trailing_slash(LEADING_SLASH.sub("", path or "", count=1))

    path = f"/{path}" if path else ""
    query = f"?{query}" if query else ""
    hash = f"#{hash}" if hash else ""

    return f"{host}{path}{query}{hash}"


def build_path(options: BuildOptions | Mapping[str, Any] | None = None, **overrides: Any) -> str:
    """Build the path part of a URL from a pattern and its arguments.

    Example:
        build_path(path="/users/:id", params={"id": 42}) -> "/users/42"
    """
    opts = coerce_options(BuildOptions, options, overrides, "path")
    return parse(opts.path, opts.params)


def build_query(options: BuildOptions | Mapping[str, Any] | None = None, **overrides: Any) -> str:
    """Build the query part of a URL, without the leading "?".

    Example:
        build_query(query={"a": 1, "b": "x y"}) -> "a=1&b=x%20y"
    """
    opts = coerce_options(BuildOptions, options, overrides, "query")
    return render_query(opts.query)


def build(options: BuildOptions | Mapping[str, Any] | None = None, **overrides: Any) -> str:
    """Build a complete URL.

    Args:
        options: BuildOptions or a mapping with any of the keys host,
            path, params, query and hash.
        **overrides: Same keys as options; they win over options.

    Returns:
        The assembled URL. Calling build() without anything returns "".

    Raises:
        InvalidOptionsError: If options are malformed.
        InvalidArgumentError: If params cannot be injected into path.

    Example:
        build(host="http://a.com/", path="/users/:id", params={"id": 42})
        -> "http://a.com/users/42"
    """
    opts = coerce_options(BuildOptions, options, overrides, "build")

    url = smart_concat(
        host=opts.host,
        path=parse(opts.path, opts.params),
        query=render_query(opts.query),
        hash=opts.hash,
    )

    logger.debug("Built url", extra={"pattern": opts.path, "url": url})
    return url


def test(options: MatchOptions | Mapping[str, Any] | None = None, **overrides: Any) -> bool:
    """Test a URL against a path pattern.

    Args:
        options: MatchOptions or a mapping with the keys path and url.
        **overrides: Same keys as options; they win over options.

    Returns:
        True if the whole url matches the pattern, else False.

    Raises:
        InvalidOptionsError: If options are malformed.
        PatternCompileError: If the pattern is not a valid expression.

    Example:
        test(path="/users/:id", url="/users/42") -> True
    """
    opts = coerce_options(MatchOptions, options, overrides, "test")

    matched = regex(opts.path).search(opts.url) is not None

    logger.debug(
        "Tested url against pattern",
        extra={"pattern": opts.path, "url": opts.url, "matched": matched},
    )
    return matched


# Keep pytest from collecting the matcher when it is imported into a test module
test.__test__ = False  # type: ignore[attr-defined]
