"""Include Directive data model for shader sources.

This module provides the IncludeDirective dataclass that represents a custom
include directive (``<keyword> "relative/path"``) found at the start of a
shader source line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IncludeDirective:
    """Represents a parsed include directive line.

    Attributes:
        keyword: The directive keyword the line started with
        raw_path: The text between the quotes, or None if it could not be located
        line: Line number in the including file (0-indexed)
        is_valid: Whether a usable path was extracted
        error_message: Error message if extraction failed, None otherwise
    """

    keyword: str
    raw_path: str | None
    line: int
    is_valid: bool
    error_message: str | None = None
