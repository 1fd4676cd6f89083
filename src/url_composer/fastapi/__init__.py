"""FastAPI adapter for url composition."""

from url_composer.fastapi.request import (
    request_matches,
    request_target,
    request_url,
    require_pattern,
)

__all__ = ["request_matches", "request_target", "request_url", "require_pattern"]
