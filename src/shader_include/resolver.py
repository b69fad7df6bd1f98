"""Include resolution for shader sources.

This module provides the IncludeResolver class which flattens a shader file
by replacing every include directive line with the recursively resolved
content of the file it names. Each file is inlined at most once per
resolution, which keeps cyclic and diamond-shaped include graphs finite.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from shader_include.config import ResolverConfig
from shader_include.diagnostics import Diagnostic, DiagnosticKind, DiagnosticSink, log_diagnostic
from shader_include.include_directive_parser import IncludeDirectiveParser
from shader_include.include_graph import IncludeGraph

logger = logging.getLogger(__name__)


@dataclass
class ResolveResult:
    """Outcome of resolving one root shader file.

    Attributes:
        text: The flattened source, every line terminated by a single newline
        visited: Comparison keys of the files inlined, root first, in inclusion order
        diagnostics: Problems reported during resolution, in the order met
        graph: Include edges met during resolution, keyed by comparison key
    """

    text: str
    visited: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    graph: IncludeGraph = field(default_factory=IncludeGraph)


@dataclass
class _ResolutionState:
    """Mutable state shared by the recursive calls of one resolution."""

    visited: list[str]
    diagnostics: list[Diagnostic] = field(default_factory=list)
    graph: IncludeGraph = field(default_factory=IncludeGraph)


class IncludeResolver:
    """Flattens shader sources containing custom include directives.

    The resolver keeps no state between calls: every call to ``resolve``
    starts from an empty visited set, so a single instance can be shared
    between threads or used again from inside a sink.
    """

    def __init__(
        self,
        config: ResolverConfig | str,
        sink: DiagnosticSink | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            config: A ResolverConfig, or just the directive keyword.
            sink: Receives every Diagnostic as it is reported. Defaults to
                  logging through this package's loggers.
        """
        if isinstance(config, str):
            config = ResolverConfig(keyword=config)
        self._config = config
        self._sink = sink if sink is not None else log_diagnostic
        self._parser = IncludeDirectiveParser(config.keyword)

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def resolve(self, file_path: str | os.PathLike[str]) -> str:
        """Resolve ``file_path`` and return the flattened text.

        A root file that cannot be read yields an empty string.
        """
        return self.resolve_with_details(file_path).text

    def resolve_with_details(self, file_path: str | os.PathLike[str]) -> ResolveResult:
        """Resolve ``file_path`` and return the text with its bookkeeping.

        Args:
            file_path: Path of the root shader file.

        Returns:
            A ResolveResult holding the flattened text, the files inlined,
            the diagnostics reported and the include graph.
        """
        path = os.fspath(file_path)
        state = _ResolutionState(visited=[self._key(path)])
        text = self._resolve_file(path, state, depth=0)
        return ResolveResult(
            text=text,
            visited=state.visited,
            diagnostics=state.diagnostics,
            graph=state.graph,
        )

    def _resolve_file(self, path: str, state: _ResolutionState, depth: int) -> str:
        lines = self._read_lines(path, state)
        if lines is None:
            return ""

        logger.debug(f"Resolving {path} ({len(lines)} lines, depth {depth})")
        current_key = self._key(path)
        chunks: list[str] = []

        for line_number, line in enumerate(lines):
            directive = self._parser.parse_line(line, line_number)
            if directive is None:
                chunks.append(line + "\n")
                continue

            if not directive.is_valid or directive.raw_path is None:
                self._report(
                    state,
                    DiagnosticKind.MALFORMED_DIRECTIVE,
                    path,
                    directive.error_message or "Malformed include directive",
                    line_number,
                )
                continue

            target = self._parser.resolve_target(path, directive.raw_path)
            target_key = self._key(target)

            if target_key == current_key:
                self._report(
                    state,
                    DiagnosticKind.SELF_INCLUSION,
                    path,
                    f"'{path}' tried to include itself",
                    line_number,
                )
                continue

            state.graph.add_edge(current_key, target_key)

            if target_key in state.visited:
                logger.debug(f"Skipping already included {target} in {path}")
                continue

            if depth + 1 > self._config.max_depth:
                self._report(
                    state,
                    DiagnosticKind.DEPTH_EXCEEDED,
                    path,
                    f"Include of '{target}' exceeds max depth {self._config.max_depth}",
                    line_number,
                )
                continue

            state.visited.append(target_key)
            chunks.append(self._resolve_file(target, state, depth + 1) + "\n")

        return "".join(chunks)

    def _read_lines(self, path: str, state: _ResolutionState) -> list[str] | None:
        """Read all lines of ``path`` with their terminators removed.

        The file is closed before any include it names is opened. Returns
        None, after reporting a diagnostic, if the file cannot be read.
        """
        try:
            with open(path, encoding=self._config.encoding, newline=None) as f:
                return [raw[:-1] if raw.endswith("\n") else raw for raw in f]
        # ValueError: the path holds a NUL character
        except (OSError, UnicodeDecodeError, ValueError) as e:
            self._report(
                state,
                DiagnosticKind.FILE_OPEN_FAILED,
                path,
                f"Failed to read '{path}': {e}",
            )
            return None

    def _key(self, path: str) -> str:
        """Return the string used to compare ``path`` with other include targets."""
        if self._config.canonicalize_paths:
            return os.path.normcase(os.path.abspath(path))
        return path

    def _report(
        self,
        state: _ResolutionState,
        kind: DiagnosticKind,
        path: str,
        message: str,
        line: int | None = None,
    ) -> None:
        diagnostic = Diagnostic(kind=kind, path=path, message=message, line=line)
        state.diagnostics.append(diagnostic)
        self._sink(diagnostic)
