"""Resolver configuration."""

from __future__ import annotations

import codecs
from dataclasses import dataclass

DEFAULT_ENCODING = "utf-8"
DEFAULT_MAX_DEPTH = 100


@dataclass(frozen=True)
class ResolverConfig:
    """Immutable settings of an IncludeResolver.

    Attributes:
        keyword: Directive keyword, matched literally at column 0 (case-sensitive)
        encoding: Text encoding of the shader sources
        canonicalize_paths: Compare include targets by normalized absolute path
            instead of by raw string
        max_depth: Deepest include nesting that is still expanded
    """

    keyword: str
    encoding: str = DEFAULT_ENCODING
    canonicalize_paths: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if not self.keyword:
            raise ValueError("Include keyword must be a non-empty string")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e
