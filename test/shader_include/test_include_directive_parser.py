"""
Unit tests for the Include Directive Parser.

Tests the IncludeDirectiveParser class for recognizing directive lines,
extracting the quoted path and computing include targets.
"""

import os

import pytest

from shader_include.include_directive_parser import (
    IncludeDirectiveParser,
    extract_directory,
    normalize_separators,
)


@pytest.mark.shader_include
class TestDirectiveDetection:
    """Test column-0 keyword matching."""

    def test_keyword_at_line_start(self) -> None:
        """Test a line starting with the keyword is a directive."""
        parser = IncludeDirectiveParser("#inc")

        assert parser.is_directive('#inc "common.glsl"') is True

    def test_plain_line_is_not_directive(self) -> None:
        """Test ordinary shader code is not a directive."""
        parser = IncludeDirectiveParser("#inc")

        assert parser.is_directive("void main() {}") is False
        assert parser.parse_line("void main() {}") is None

    def test_leading_whitespace_is_not_directive(self) -> None:
        """Test the keyword must start at column 0."""
        parser = IncludeDirectiveParser("#inc")

        assert parser.parse_line('  #inc "common.glsl"') is None

    def test_mid_line_keyword_is_not_directive(self) -> None:
        """Test a keyword embedded later in the line is ignored."""
        parser = IncludeDirectiveParser("#inc")

        assert parser.parse_line('float x; #inc "common.glsl"') is None

    def test_keyword_is_case_sensitive(self) -> None:
        """Test matching is case-sensitive."""
        parser = IncludeDirectiveParser("#inc")

        assert parser.parse_line('#INC "common.glsl"') is None


@pytest.mark.shader_include
class TestPathExtraction:
    """Test extraction of the quoted path argument."""

    def test_simple_path(self) -> None:
        """Test the path between the quotes is extracted."""
        parser = IncludeDirectiveParser("#inc")

        directive = parser.parse_line('#inc "lib/noise.glsl"', 4)

        assert directive is not None
        assert directive.is_valid is True
        assert directive.raw_path == "lib/noise.glsl"
        assert directive.line == 4
        assert directive.keyword == "#inc"

    def test_text_around_quotes_is_ignored(self) -> None:
        """Test text before the opening and after the closing quote is dropped."""
        parser = IncludeDirectiveParser("//!include")

        directive = parser.parse_line('//!include file = "a.glsl" // trailing "b.glsl"')

        assert directive is not None
        assert directive.raw_path == "a.glsl"

    def test_missing_opening_quote(self) -> None:
        """Test a directive without any quote is invalid."""
        parser = IncludeDirectiveParser("#inc")

        directive = parser.parse_line("#inc common.glsl", 2)

        assert directive is not None
        assert directive.is_valid is False
        assert directive.raw_path is None
        assert directive.line == 2
        assert directive.error_message is not None

    def test_missing_closing_quote(self) -> None:
        """Test a directive with a single quote is invalid."""
        parser = IncludeDirectiveParser("#inc")

        directive = parser.parse_line('#inc "common.glsl')

        assert directive is not None
        assert directive.is_valid is False
        assert directive.raw_path is None

    def test_empty_path(self) -> None:
        """Test an empty quoted path is invalid."""
        parser = IncludeDirectiveParser("#inc")

        directive = parser.parse_line('#inc ""')

        assert directive is not None
        assert directive.is_valid is False
        assert directive.raw_path == ""
        assert directive.error_message == "Empty path in include directive"

    def test_quote_inside_keyword_is_not_used(self) -> None:
        """Test the search for quotes starts after the keyword."""
        parser = IncludeDirectiveParser('#"inc')

        directive = parser.parse_line('#"inc "x.glsl"')

        assert directive is not None
        assert directive.raw_path == "x.glsl"


@pytest.mark.shader_include
class TestTargetResolution:
    """Test computing include targets from the including file."""

    def test_extract_directory_posix(self) -> None:
        """Test directory portion keeps the trailing separator."""
        assert extract_directory("shaders/lib/a.glsl") == "shaders/lib/"

    def test_extract_directory_windows(self) -> None:
        """Test backslash separators are recognized."""
        assert extract_directory("shaders\\lib\\a.glsl") == "shaders\\lib\\"

    def test_extract_directory_mixed(self) -> None:
        """Test the last separator of either kind wins."""
        assert extract_directory("shaders\\lib/sub\\a.glsl") == "shaders\\lib/sub\\"

    def test_extract_directory_no_separator(self) -> None:
        """Test a bare file name has an empty directory."""
        assert extract_directory("a.glsl") == ""

    def test_normalize_separators(self) -> None:
        """Test both separator kinds end up as the host separator."""
        expected = os.sep.join(["lib", "sub", "noise.glsl"])

        assert normalize_separators("lib\\sub/noise.glsl") == expected

    def test_resolve_target_relative_to_current_file(self) -> None:
        """Test the target is the current directory plus the relative path."""
        parser = IncludeDirectiveParser("#inc")

        target = parser.resolve_target("shaders/main.frag", "lib/noise.glsl")

        assert target == "shaders/" + os.sep.join(["lib", "noise.glsl"])

    def test_resolve_target_without_directory(self) -> None:
        """Test a current file without directory yields the bare relative path."""
        parser = IncludeDirectiveParser("#inc")

        assert parser.resolve_target("a.glsl", "b.glsl") == "b.glsl"
