"""Unit tests for exception hierarchy."""

import pytest

from url_composer.exceptions import (
    InvalidArgumentError,
    InvalidOptionsError,
    MissingParameterError,
    PatternCompileError,
    UrlComposerError,
)


class TestUrlComposerError:
    """Tests for the base exception class."""

    def test_inherits_from_exception(self) -> None:
        """UrlComposerError inherits from Exception."""
        assert issubclass(UrlComposerError, Exception)

    def test_can_be_raised_with_message(self) -> None:
        """UrlComposerError can be raised with a descriptive message."""
        with pytest.raises(UrlComposerError, match="test error message"):
            raise UrlComposerError("test error message")

    def test_message_is_preserved(self) -> None:
        """Exception message is accessible."""
        error = UrlComposerError("specific error details")
        assert str(error) == "specific error details"


class TestInvalidArgumentError:
    """Tests for argument injection errors."""

    def test_inherits_from_base_and_value_error(self) -> None:
        """InvalidArgumentError is both a UrlComposerError and a ValueError."""
        assert issubclass(InvalidArgumentError, UrlComposerError)
        assert issubclass(InvalidArgumentError, ValueError)

    def test_can_be_caught_with_base_class(self) -> None:
        """InvalidArgumentError can be caught as UrlComposerError."""
        try:
            raise InvalidArgumentError("no named parameters")
        except UrlComposerError as e:
            assert isinstance(e, InvalidArgumentError)


class TestMissingParameterError:
    """Tests for missing keyed argument errors."""

    def test_hierarchy(self) -> None:
        """MissingParameterError is an InvalidArgumentError and a KeyError."""
        assert issubclass(MissingParameterError, InvalidArgumentError)
        assert issubclass(MissingParameterError, KeyError)

    def test_carries_name_and_pattern(self) -> None:
        """The parameter name and pattern are kept on the exception."""
        error = MissingParameterError("id", "/users/:id")
        assert error.name == "id"
        assert error.pattern == "/users/:id"

    def test_message_is_not_quoted(self) -> None:
        """str() gives the plain message rather than KeyError's repr."""
        error = MissingParameterError("id", "/users/:id")
        assert str(error) == "No value for parameter 'id' in pattern '/users/:id'"


class TestInvalidOptionsError:
    """Tests for malformed options errors."""

    def test_hierarchy(self) -> None:
        """InvalidOptionsError is a UrlComposerError and a TypeError."""
        assert issubclass(InvalidOptionsError, UrlComposerError)
        assert issubclass(InvalidOptionsError, TypeError)


class TestPatternCompileError:
    """Tests for regex compilation errors."""

    def test_inherits_from_base(self) -> None:
        """PatternCompileError inherits from UrlComposerError."""
        assert issubclass(PatternCompileError, UrlComposerError)

    def test_carries_pattern(self) -> None:
        """The offending pattern is kept on the exception."""
        error = PatternCompileError("bad pattern", "/a)")
        assert error.pattern == "/a)"
        assert str(error) == "bad pattern"
