"""Argument injection into path patterns.

Fills the parameters of a dynamic path with encoded values and removes
whatever optional groups are left unfilled.
"""

import logging
import re
from collections.abc import Sequence
from typing import Any

from url_composer.core.arguments import ArgumentKind, Arguments
from url_composer.core.tokens import (
    NAMED_PARAMS,
    OPTIONAL_PARAMS,
    PARENTHESES,
    SPLAT_PARAMS,
    TRAILING_SLASH,
    encode_component,
    match,
    strip_sigil,
)
from url_composer.exceptions import InvalidArgumentError, MissingParameterError

logger = logging.getLogger(__name__)


def parse(pattern: str | None, args: Any = None) -> str:
    """Inject arguments into a path pattern and clean unused optional parts.

    Parameter positions are located once in the pattern, so injected
    values are never read back as parameters. After injection every
    "(" and ")" is removed from the result, including ones that came in
    with a value: encoding leaves parentheses alone, so ["f(x)"] fills
    ":q" as "fx".

    Args:
        pattern: Dynamic path pattern. None is treated as "".
        args: Positional sequence, keyed mapping, Arguments, or None.
            Sequences are injected in reading order; mappings are looked
            up by parameter name.

    Returns:
        The filled path.

    Raises:
        InvalidArgumentError: If keyed arguments are given for a pattern
            without named parameters.
        MissingParameterError: If keyed arguments lack a named parameter.

    Examples:
        ("/users(/:id)", None) -> "/users"
        ("/users(/:id)", [7]) -> "/users/7"
        ("/users/:id/", {"id": "a b"}) -> "/users/a%20b"
        ("/files/*path", ["x"]) -> "/files/x"
        ("/a(b", None) -> "/a(b"
    """
    pattern = pattern or ""
    arguments = Arguments.from_value(args)

    if arguments.is_empty:
        return remove_optional_params(pattern)

    path = replace_args(pattern, arguments)

    return remove_trailing_slash(remove_parentheses(path))


def replace_args(pattern: str, arguments: Arguments) -> str:
    """Substitute argument values and drop optional groups left unfilled.

    Keyed arguments are first turned into a sequence ordered by the
    named parameters of the pattern. Each value fills the first unfilled
    named parameter while the path still contains a ":", and the first
    unfilled splat parameter otherwise. Optional groups that keep an
    unfilled parameter are removed with their content.
    """
    match arguments.kind:
        case ArgumentKind.POSITIONAL:
            values: Sequence[Any] = arguments.values
        case ArgumentKind.KEYED:
            values = _keyed_to_sequence(pattern, arguments)
        case ArgumentKind.EMPTY:
            values = ()

    slots = sorted(
        [*NAMED_PARAMS.finditer(pattern), *SPLAT_PARAMS.finditer(pattern)],
        key=lambda slot: slot.start(),
    )
    filled: dict[int, str] = {}

    for value in values:
        index = _next_slot(pattern, slots, filled)
        if index is not None:
            filled[index] = encode_component(value)

    unfilled = [slot for i, slot in enumerate(slots) if i not in filled]
    dropped = [
        group.span()
        for group in OPTIONAL_PARAMS.finditer(pattern)
        if any(_overlaps(slot.span(), group.span()) for slot in unfilled)
    ]

    return _render(pattern, slots, filled, dropped)


def _next_slot(pattern: str, slots: list[re.Match[str]], filled: dict[int, str]) -> int | None:
    """Index of the parameter the next value goes to, or None if there is none."""
    # Encoded values never contain ":"
    named = ":" in _render(pattern, slots, filled)

    for i, slot in enumerate(slots):
        if i not in filled and (slot.re is NAMED_PARAMS) == named:
            return i
    return None


def _render(
    pattern: str,
    slots: list[re.Match[str]],
    filled: dict[int, str],
    dropped: list[tuple[int, int]] | None = None,
) -> str:
    """Rebuild a pattern with filled parameters and dropped spans replaced."""
    edits = [(slots[i].start(), slots[i].end(), text) for i, text in filled.items()]
    edits += [(start, end, "") for start, end in dropped or ()]
    # Widest span first when two start together
    edits.sort(key=lambda edit: (edit[0], -edit[1]))

    pieces = []
    pos = 0
    for start, end, text in edits:
        if start < pos:
            # inside a span that was already replaced
            continue
        pieces.append(pattern[pos:start])
        pieces.append(text)
        pos = end
    pieces.append(pattern[pos:])

    return "".join(pieces)


def _overlaps(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return a[0] < b[1] and b[0] < a[1]


def remove_optional_params(path: str) -> str:
    """Strip every optional group, parentheses and content, from a path."""
    return OPTIONAL_PARAMS.sub("", path)


def remove_trailing_slash(path: str) -> str:
    return TRAILING_SLASH.sub("", path, count=1)


def remove_parentheses(path: str) -> str:
    return PARENTHESES.sub("", path)


def _keyed_to_sequence(pattern: str, arguments: Arguments) -> list[Any]:
    """Order keyed argument values by the named parameters of a pattern."""
    named = match(pattern).named
    if not named:
        raise InvalidArgumentError(
            f"Keyed arguments require named parameters, but pattern '{pattern}' has none"
        )

    values = []
    for token in named:
        name = strip_sigil(token)
        if name not in arguments.mapping:
            logger.debug(
                "Missing keyed argument",
                extra={"parameter": name, "pattern": pattern},
            )
            raise MissingParameterError(name, pattern)
        values.append(arguments.mapping[name])

    return values
