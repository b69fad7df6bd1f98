"""Diagnostics reported while resolving shader includes.

Problems met during resolution never abort it. Each one is described by a
Diagnostic value, handed to a sink and collected on the ResolveResult.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class DiagnosticKind(Enum):
    """Kinds of recoverable problems met during resolution."""

    FILE_OPEN_FAILED = "file_open_failed"
    MALFORMED_DIRECTIVE = "malformed_directive"
    SELF_INCLUSION = "self_inclusion"
    DEPTH_EXCEEDED = "depth_exceeded"

    @property
    def is_warning(self) -> bool:
        return self is DiagnosticKind.SELF_INCLUSION


@dataclass(frozen=True)
class Diagnostic:
    """A single advisory message produced during resolution.

    Attributes:
        kind: What went wrong
        path: The file being processed when the problem was found
        message: Human-readable description
        line: Line number in ``path`` (0-indexed), None for file-level problems
    """

    kind: DiagnosticKind
    path: str
    message: str
    line: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.path}: {self.message}"
        return f"{self.path}:{self.line + 1}: {self.message}"


DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: forward the diagnostic to the module logger."""
    if diagnostic.kind.is_warning:
        logger.warning(str(diagnostic))
    else:
        logger.error(str(diagnostic))
