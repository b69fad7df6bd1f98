"""Command-line interface for the shader include resolver."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from shader_include.config import DEFAULT_ENCODING, DEFAULT_MAX_DEPTH, ResolverConfig
from shader_include.resolver import IncludeResolver

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="shader-include",
        description="Flatten a shader file by inlining its custom include directives",
    )
    p.add_argument("keyword", help='directive keyword, e.g. "#inc" (matched at column 0)')
    p.add_argument("root", help="root shader file")
    p.add_argument(
        "-o",
        "--output",
        type=Path,
        help="write the flattened source here instead of stdout",
    )
    p.add_argument("--encoding", default=DEFAULT_ENCODING, help="source text encoding")
    p.add_argument(
        "--canonicalize",
        action="store_true",
        help="compare include targets by normalized absolute path",
    )
    p.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help="deepest include nesting that is still expanded",
    )
    p.add_argument(
        "--check-cycles",
        action="store_true",
        help="treat circular includes as errors instead of skipping them silently",
    )
    p.add_argument(
        "--list-deps",
        action="store_true",
        help="print the files the root depends on to stderr, one per line",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        0 on success, 1 if any error diagnostic was reported.
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s [%(name)s]: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = ResolverConfig(
            keyword=ns.keyword,
            encoding=ns.encoding,
            canonicalize_paths=ns.canonicalize,
            max_depth=ns.max_depth,
        )
    except ValueError as e:
        parser.error(str(e))

    result = IncludeResolver(config).resolve_with_details(ns.root)

    if ns.output is not None:
        ns.output.write_text(result.text, encoding=ns.encoding, newline="\n")
        logger.info(f"Wrote {len(result.visited)} file(s) into {ns.output}")
    else:
        sys.stdout.write(result.text)

    root_key = result.visited[0]
    if ns.list_deps:
        for dep in result.graph.get_transitive_includes(root_key):
            print(dep, file=sys.stderr)

    errors = [d for d in result.diagnostics if not d.kind.is_warning]
    if ns.check_cycles and result.graph.has_cycle(root_key):
        logger.error(f"Include graph of {ns.root} contains a cycle")
        return 1
    return 1 if errors else 0
