"""Include Directive Parser for shader sources.

This module provides the IncludeDirectiveParser class for recognizing include
directive lines, extracting their quoted path argument and computing the path
of the included file relative to the including one.
"""

from __future__ import annotations

import os

from shader_include.include_directive import IncludeDirective

QUOTE = '"'
SEPARATORS = "/\\"


class IncludeDirectiveParser:
    """Parser for line-anchored include directives.

    A line is a directive only when it starts, at column 0, with the exact
    (case-sensitive) keyword. The path argument is whatever sits between the
    first pair of double quotes after the keyword; anything before the opening
    quote or after the closing quote is ignored.
    """

    def __init__(self, keyword: str) -> None:
        """Initialize the parser.

        Args:
            keyword: The directive keyword, e.g. ``#inc``.
        """
        self._keyword = keyword

    @property
    def keyword(self) -> str:
        return self._keyword

    def is_directive(self, line: str) -> bool:
        return line.startswith(self._keyword)

    def parse_line(self, line: str, line_number: int = 0) -> IncludeDirective | None:
        """Parse a single source line.

        Args:
            line: The line content, without its terminator.
            line_number: The 0-indexed line number, kept for diagnostics.

        Returns:
            None if the line is not a directive, otherwise an IncludeDirective
            which may be invalid when the quoted path could not be located.
        """
        if not self.is_directive(line):
            return None

        remainder = line[len(self._keyword) :]
        start = remainder.find(QUOTE)
        end = remainder.find(QUOTE, start + 1) if start != -1 else -1

        if start == -1 or end == -1:
            return IncludeDirective(
                keyword=self._keyword,
                raw_path=None,
                line=line_number,
                is_valid=False,
                error_message=f"Opening or closing '{QUOTE}' not found in include directive",
            )

        raw_path = remainder[start + 1 : end]
        if not raw_path:
            return IncludeDirective(
                keyword=self._keyword,
                raw_path=raw_path,
                line=line_number,
                is_valid=False,
                error_message="Empty path in include directive",
            )

        return IncludeDirective(
            keyword=self._keyword,
            raw_path=raw_path,
            line=line_number,
            is_valid=True,
        )

    def resolve_target(self, current_path: str, raw_path: str) -> str:
        """Compute the path of an included file.

        Args:
            current_path: Path of the file containing the directive.
            raw_path: The relative path taken from the directive.

        Returns:
            The directory portion of ``current_path`` followed by the
            separator-normalized ``raw_path``.
        """
        return extract_directory(current_path) + normalize_separators(raw_path)


def normalize_separators(raw_path: str) -> str:
    """Convert directory separators in ``raw_path`` to the host convention."""
    # Forward slashes internally, host separator only at the file-system boundary
    normalized = raw_path.replace("\\", "/")
    if os.sep != "/":
        normalized = normalized.replace("/", os.sep)
    return normalized


def extract_directory(path: str) -> str:
    """Return ``path`` up to and including its last separator.

    Returns an empty string when ``path`` holds no separator at all.
    """
    pos = max(path.rfind(sep) for sep in SEPARATORS)
    if pos == -1:
        return ""
    return path[: pos + 1]
