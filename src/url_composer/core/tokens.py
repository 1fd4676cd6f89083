"""Path pattern grammar and token extraction.

A path pattern is literal text mixed with three constructs:
- :name -> named parameter (one path segment)
- *name -> splat parameter (any run of characters)
- (...) -> optional group (one level, no nesting)

Parameter names are ASCII word characters. The compiled expressions below
are shared by every other component and never mutated.
"""

import re
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

TRAILING_SLASH = re.compile(r"/\Z")
LEADING_SLASH = re.compile(r"\A/")
PARENTHESES = re.compile(r"[()]")
OPTIONAL_PARAMS = re.compile(r"\((.*?)\)")
SPLAT_PARAMS = re.compile(r"\*\w+", re.ASCII)
# A leading "(?" is captured so the regex compiler can tell tokens that sit
# right behind a non-capturing group marker apart from the rest.
NAMED_PARAMS = re.compile(r"(\(\?)?:\w+", re.ASCII)
REGEX_SPECIALS = re.compile(r"[\-{}\[\]+?.,\\^$|#\s]")

# Characters encodeURIComponent leaves alone, besides letters, digits and "_.-~"
_COMPONENT_SAFE = "!*'()"


@dataclass(frozen=True)
class ParamsMatch:
    """Named and splat tokens of a pattern, in reading order, sigils included.

    Frozen but unhashable: the token lists compare by value.
    """

    __hash__ = None  # type: ignore[assignment]

    named: list[str] = field(default_factory=list)
    splat: list[str] = field(default_factory=list)

    @property
    def tokens(self) -> list[str]:
        """Named tokens followed by splat tokens."""
        return [*self.named, *self.splat]

    def to_dict(self) -> dict[str, list[str]]:
        return {"named": list(self.named), "splat": list(self.splat)}


def match(pattern: str | None) -> ParamsMatch:
    """Extract named and splat parameter tokens from a path pattern.

    Args:
        pattern: Dynamic path pattern. None is treated as an empty pattern.

    Returns:
        ParamsMatch with both token lists, empty when a kind is absent.

    Examples:
        "/:a/*b" -> ParamsMatch(named=[":a"], splat=["*b"])
        "/users(/:id)" -> ParamsMatch(named=[":id"], splat=[])
        "/static" -> ParamsMatch(named=[], splat=[])
    """
    pattern = pattern or ""
    return ParamsMatch(
        named=[m.group(0) for m in NAMED_PARAMS.finditer(pattern)],
        splat=[m.group(0) for m in SPLAT_PARAMS.finditer(pattern)],
    )


def strip_sigil(token: str) -> str:
    """Return the argument key for a token (":id" -> "id")."""
    return token[1:]


def optional_groups(pattern: str) -> list[str]:
    """Return every "(...)" span of a pattern, parentheses included."""
    return [m.group(0) for m in OPTIONAL_PARAMS.finditer(pattern)]


def stringify(value: Any) -> str:
    """Render an argument or query value as text.

    Booleans render lowercase and None renders empty, matching how
    the values would read in a browser-built URL.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_component(value: Any) -> str:
    """Percent-encode a value for use as a single URL component.

    Leaves ASCII letters, digits and "-_.!~*'()" untouched and encodes
    everything else as UTF-8 percent escapes, "/" included.

    Examples:
        "x y" -> "x%20y"
        "a/b" -> "a%2Fb"
        42 -> "42"
    """
    return quote(stringify(value), safe=_COMPONENT_SAFE)
