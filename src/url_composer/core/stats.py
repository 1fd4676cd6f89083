"""Parameter statistics for path patterns.

Reports which parameters a pattern declares, which of them sit inside an
optional group, and which would be left without a value by a given
argument set.
"""

from dataclasses import dataclass
from typing import Any

from url_composer.core.arguments import ArgumentKind, Arguments, params
from url_composer.core.tokens import OPTIONAL_PARAMS, match, optional_groups, strip_sigil


@dataclass(frozen=True)
class ParamDescriptor:
    """A pattern parameter and the value an argument set gives it."""

    name: str
    value: Any
    optional: bool

    @property
    def required(self) -> bool:
        return not self.optional

    @property
    def is_missing(self) -> bool:
        return self.value == ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "optional": self.optional,
            "required": self.required,
        }


@dataclass(frozen=True)
class StatsReport:
    """Statistics about a path pattern filled with an argument set.

    Frozen but unhashable: the descriptor lists compare by value.
    """

    __hash__ = None  # type: ignore[assignment]

    params: list[ParamDescriptor]
    has_optional_params: bool
    missing_optional_params: list[ParamDescriptor]
    missing_required_params: list[ParamDescriptor]
    missing_params: list[ParamDescriptor]

    def to_dict(self) -> dict[str, Any]:
        """Return the report with camelCase keys and plain dict descriptors."""
        return {
            "params": [p.to_dict() for p in self.params],
            "hasOptionalParams": self.has_optional_params,
            "missingOptionalParams": [p.to_dict() for p in self.missing_optional_params],
            "missingRequiredParams": [p.to_dict() for p in self.missing_required_params],
            "missingParams": [p.to_dict() for p in self.missing_params],
        }


def stats(pattern: str | None, args: Any = None) -> StatsReport:
    """Generate statistics about a pattern filled with the given arguments.

    Positional arguments are converted with params(), so named parameters
    take values before splat parameters.

    A parameter counts as optional when its token text occurs inside any
    "(...)" span of the pattern. This is a plain substring check: an
    optional group whose text happens to contain another parameter's
    token marks that parameter optional as well.

    Args:
        pattern: Dynamic path pattern. None is treated as "".
        args: Positional sequence, keyed mapping, Arguments, or None.

    Returns:
        StatsReport describing every named then splat parameter.

    Examples:
        stats("/users/:id", {}).missing_required_params -> [":id" descriptor]
        stats("/users(/:id)", {"id": 5}).params[0].optional -> True
    """
    pattern = pattern or ""
    groups = optional_groups(pattern)
    arguments = Arguments.from_value(args)

    match arguments.kind:
        case ArgumentKind.POSITIONAL:
            values = params(pattern, arguments.values)
        case ArgumentKind.KEYED:
            values = dict(arguments.mapping)
        case ArgumentKind.EMPTY:
            values = {}

    descriptors = []
    for token in match(pattern).tokens:
        value = values.get(strip_sigil(token))
        descriptors.append(
            ParamDescriptor(
                name=token,
                value="" if value is None else value,
                optional=any(token in group for group in groups),
            )
        )

    return StatsReport(
        params=descriptors,
        has_optional_params=OPTIONAL_PARAMS.search(pattern) is not None,
        missing_optional_params=[p for p in descriptors if p.optional and p.is_missing],
        missing_required_params=[p for p in descriptors if p.required and p.is_missing],
        missing_params=[p for p in descriptors if p.is_missing],
    )
