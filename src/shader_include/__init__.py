"""Shader Include Resolver Package.

This package flattens shader sources by inlining files named by a custom,
line-anchored include directive.
"""

from shader_include.config import ResolverConfig
from shader_include.diagnostics import Diagnostic, DiagnosticKind
from shader_include.include_graph import IncludeGraph
from shader_include.resolver import IncludeResolver, ResolveResult

__all__ = [
    "IncludeResolver",
    "ResolveResult",
    "ResolverConfig",
    "Diagnostic",
    "DiagnosticKind",
    "IncludeGraph",
]
