"""Build, match and analyse URLs from dynamic path patterns."""

# Primary API
from url_composer.core.arguments import ArgumentKind, Arguments, params
from url_composer.core.assembler import (
    BuildOptions,
    MatchOptions,
    build,
    smart_concat,
    test,
)
from url_composer.core.assembler import build_path as path
from url_composer.core.assembler import build_query as query
from url_composer.core.compiler import regex
from url_composer.core.stats import ParamDescriptor, StatsReport, stats
from url_composer.core.tokens import ParamsMatch, encode_component, match

# Exceptions
from url_composer.exceptions import (
    InvalidArgumentError,
    InvalidOptionsError,
    MissingParameterError,
    PatternCompileError,
    UrlComposerError,
)

__all__ = [
    # Primary API
    "build",
    "match",
    "params",
    "path",
    "query",
    "regex",
    "stats",
    "test",
    # Core types
    "ArgumentKind",
    "Arguments",
    "BuildOptions",
    "MatchOptions",
    "ParamDescriptor",
    "ParamsMatch",
    "StatsReport",
    # Helpers
    "encode_component",
    "smart_concat",
    # Exceptions
    "InvalidArgumentError",
    "InvalidOptionsError",
    "MissingParameterError",
    "PatternCompileError",
    "UrlComposerError",
]

__version__ = "1.0.0"
