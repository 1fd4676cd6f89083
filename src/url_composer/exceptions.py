"""Exception hierarchy for URL composition errors."""


class UrlComposerError(Exception):
    """Base exception for all URL composition errors.

    This is the parent class for all exceptions raised by the
    url-composer package. Catching this exception will catch all
    composition-related errors.

    Example:
        try:
            url = build(path="/users/:id", params={"name": "x"})
        except UrlComposerError as e:
            logger.error(f"Failed to build url: {e}")
    """


class InvalidArgumentError(UrlComposerError, ValueError):
    """Raised when arguments cannot be injected into a path pattern.

    This exception is raised when keyed arguments are supplied for a
    pattern that has no named parameters to look them up by.

    Example:
        InvalidArgumentError(
            "Keyed arguments require named parameters, "
            "but pattern '/files/*path' has none"
        )
    """


class MissingParameterError(InvalidArgumentError, KeyError):
    """Raised when keyed arguments lack a value for a named parameter.

    The missing parameter name (without its ``:`` sigil) is available
    as ``name``.

    Example:
        MissingParameterError("id", "/users/:id")
    """

    def __init__(self, name: str, pattern: str) -> None:
        self.name = name
        self.pattern = pattern
        super().__init__(f"No value for parameter '{name}' in pattern '{pattern}'")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvalidOptionsError(UrlComposerError, TypeError):
    """Raised when options passed to a facade function are malformed.

    This exception is raised when:
        - options is neither a mapping nor an options dataclass
        - options contain keys the function does not understand

    Example:
        InvalidOptionsError("Unknown option(s) for build: ['hots']")
    """


class PatternCompileError(UrlComposerError):
    """Raised when a path pattern does not compile to a valid regex.

    The offending pattern is available as ``pattern`` and the original
    ``re.error`` is chained as ``__cause__``.

    Example:
        PatternCompileError("Cannot compile pattern '/a/*': nothing to repeat")
    """

    def __init__(self, message: str, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(message)
