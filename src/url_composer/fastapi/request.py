"""Request helpers for FastAPI and Starlette applications.

Builds absolute URLs relative to the incoming request and checks request
URLs against path patterns.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from fastapi import HTTPException, Request

from url_composer.core.assembler import BuildOptions, build, coerce_options, test

logger = logging.getLogger(__name__)


def request_url(
    request: Request,
    options: BuildOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Build a URL, using the request's base URL when no host is given.

    Example:
        @app.get("/users/{user_id}")
        def get(user_id: int, request: Request):
            return {"self": request_url(request, path="/users/:id", params=[user_id])}
    """
    opts = coerce_options(BuildOptions, options, overrides, "request_url")
    if not opts.host:
        opts = replace(opts, host=str(request.base_url))
    return build(opts)


def request_target(request: Request) -> str:
    """Return the request path followed by its raw query string, if any."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def request_matches(request: Request, pattern: str) -> bool:
    """Check whether the request path and query match a path pattern."""
    return test(path=pattern, url=request_target(request))


def require_pattern(pattern: str, *, status_code: int = 404) -> Callable[[Request], None]:
    """Create a dependency that rejects requests not matching a pattern.

    Args:
        pattern: Dynamic path pattern the request URL must match.
        status_code: Status of the HTTPException raised on mismatch.

    Returns:
        A FastAPI dependency callable.

    Example:
        @app.get("/legacy/{rest:path}", dependencies=[Depends(require_pattern("/legacy/:id"))])
        def legacy(rest: str): ...
    """

    def dependency(request: Request) -> None:
        if not request_matches(request, pattern):
            logger.debug(
                "Request rejected by path pattern",
                extra={"pattern": pattern, "path": request.url.path},
            )
            raise HTTPException(status_code=status_code)

    return dependency
