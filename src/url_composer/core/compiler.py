"""Path pattern to regular expression compiler.

The transformation runs in a fixed order:
1. escape regex metacharacters in the literal text
2. (group) -> (?:group)?
3. :name -> ([^/?]+)
4. *name -> ([^?]*?)
5. anchor and append an optional capture for the query string

Step 3 leaves alone any ":word" run that directly follows "(?". Step 2 puts
"(?:" in front of every optional group body, so a group opening with
literal text such as "(edit)" would otherwise read as the named parameter
":edit". The check is purely positional: it looks at the two characters in
front of the token, not at group structure.
"""

import logging
import re
from functools import lru_cache

from url_composer.core.tokens import (
    NAMED_PARAMS,
    OPTIONAL_PARAMS,
    REGEX_SPECIALS,
    SPLAT_PARAMS,
)
from url_composer.exceptions import PatternCompileError

logger = logging.getLogger(__name__)

REGEX_CACHE_SIZE = 256

NAMED_CAPTURE = r"([^/?]+)"
SPLAT_CAPTURE = r"([^?]*?)"
QUERY_CAPTURE = r"(?:\?([\s\S]*))?"


def route_to_source(route: str) -> str:
    """Transform a path pattern into regular expression source text.

    Examples:
        "/users/:id" -> "^/users/([^/?]+)(?:\\?([\\s\\S]*))?\\Z"
        "/users(/:id)" -> "^/users(?:/([^/?]+))?(?:\\?([\\s\\S]*))?\\Z"
        "/files/*path" -> "^/files/([^?]*?)(?:\\?([\\s\\S]*))?\\Z"
    """
    route = REGEX_SPECIALS.sub(r"\\\g<0>", route)
    route = OPTIONAL_PARAMS.sub(r"(?:\1)?", route)
    route = NAMED_PARAMS.sub(_named_replacement, route)
    route = SPLAT_PARAMS.sub(SPLAT_CAPTURE, route)

    return "^" + route + QUERY_CAPTURE + r"\Z"


def _named_replacement(token: re.Match[str]) -> str:
    # group(1) is the "(?" marker directly in front of the token
    if token.group(1):
        return token.group(0)
    return NAMED_CAPTURE


@lru_cache(maxsize=REGEX_CACHE_SIZE)
def _compile(route: str) -> re.Pattern[str]:
    source = route_to_source(route)
    try:
        compiled = re.compile(source)
    except re.error as e:
        raise PatternCompileError(f"Cannot compile pattern '{route}': {e}", route) from e

    logger.debug(
        "Compiled path pattern",
        extra={"pattern": route, "regex": source, "groups": compiled.groups},
    )
    return compiled


def regex(pattern: str | None) -> re.Pattern[str]:
    """Compile a path pattern into an anchored regular expression.

    Capture groups follow the parameters in reading order, with one
    final group for the raw query string (None when there is none).

    Args:
        pattern: Dynamic path pattern. None is treated as "".

    Returns:
        Compiled regular expression. Identical patterns share one
        compiled instance.

    Raises:
        PatternCompileError: If the pattern yields an invalid expression,
            e.g. a bare "*" with no name after it.

    Example:
        regex("/users/:id").match("/users/42?x=1").groups() == ("42", "x=1")
    """
    return _compile(pattern or "")
