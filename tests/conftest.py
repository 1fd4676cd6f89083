"""Shared pytest fixtures for url-composer tests."""

import logging

import pytest


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records emitted by the url_composer loggers."""
    caplog.set_level(logging.DEBUG, logger="url_composer")
    return caplog


@pytest.fixture
def optional_pattern() -> str:
    """Return a pattern with one required and two optional parameters."""
    return "/users/:id(/posts/:post)(/page/:page)"


@pytest.fixture
def splat_pattern() -> str:
    """Return a pattern made of splat parameters only."""
    return "/files/*dir/raw/*name"
