"""Argument sets for path patterns.

Arguments come either as a sequence (injected in order) or as a mapping
(looked up by parameter name). Everything is classified once into an
Arguments value so the components switch on its kind instead of on the
raw Python type.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from url_composer.core.tokens import match, strip_sigil


class ArgumentKind(Enum):
    """Shape of an argument set."""

    EMPTY = "empty"
    POSITIONAL = "positional"
    KEYED = "keyed"


_EMPTY_MAPPING: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class Arguments:
    """A classified argument set.

    Only the attribute matching ``kind`` carries data: ``values`` for
    POSITIONAL, ``mapping`` for KEYED.
    """

    kind: ArgumentKind
    values: tuple[Any, ...] = ()
    mapping: Mapping[str, Any] = field(default_factory=lambda: _EMPTY_MAPPING)

    @property
    def is_empty(self) -> bool:
        return self.kind is ArgumentKind.EMPTY

    @classmethod
    def empty(cls) -> "Arguments":
        return cls(ArgumentKind.EMPTY)

    @classmethod
    def positional(cls, values: Sequence[Any]) -> "Arguments":
        if not values:
            return cls.empty()
        return cls(ArgumentKind.POSITIONAL, values=tuple(values))

    @classmethod
    def keyed(cls, mapping: Mapping[str, Any]) -> "Arguments":
        if not mapping:
            return cls.empty()
        return cls(ArgumentKind.KEYED, mapping=MappingProxyType(dict(mapping)))

    @classmethod
    def from_value(cls, args: Any) -> "Arguments":
        """Classify a raw argument value.

        Args:
            args: An Arguments instance, a mapping, a sequence, or None.

        Returns:
            Arguments tagged KEYED for non-empty mappings, POSITIONAL for
            non-empty sequences and EMPTY for everything else. Strings,
            bytes and other scalars count as EMPTY.

        Examples:
            None -> EMPTY
            {} -> EMPTY
            {"id": 1} -> KEYED
            [1, 2] -> POSITIONAL
            "abc" -> EMPTY
        """
        if isinstance(args, Arguments):
            return args
        if isinstance(args, Mapping):
            return cls.keyed(args)
        if isinstance(args, Sequence) and not isinstance(args, (str, bytes, bytearray)):
            return cls.positional(args)
        return cls.empty()


def params(pattern: str | None, args: Sequence[Any] | None) -> dict[str, Any]:
    """Convert positional arguments into keyed arguments for a pattern.

    Named parameters consume values first, then splat parameters, no
    matter where each kind appears in the pattern. Parameters without a
    matching position map to None.

    Args:
        pattern: Dynamic path pattern.
        args: Positional argument values.

    Returns:
        Dictionary of parameter name (without sigil) to value.

    Examples:
        ("/:a/*b", [1, "x/y"]) -> {"a": 1, "b": "x/y"}
        ("/*rest/:id", ["r", 7]) -> {"id": "r", "rest": 7}
        ("/:a/:b", [1]) -> {"a": 1, "b": None}
    """
    values = list(args or ())
    result: dict[str, Any] = {}

    for i, token in enumerate(match(pattern).tokens):
        result[strip_sigil(token)] = values[i] if i < len(values) else None

    return result
