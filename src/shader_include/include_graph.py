"""Include Graph for shader include relationships.

This module provides the IncludeGraph class which records, during one
resolution, which shader file includes which. Every directive that resolves
to a target is recorded, including the ones skipped as duplicates, so cycles
stay visible after flattening.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class IncludeGraph:
    """Directed graph of include relationships between shader files.

    This class maintains:
    - Forward edges (path -> list of included paths)
    - Reverse edges (path -> list of including paths)
    """

    def __init__(self) -> None:
        """Initialize an empty include graph."""
        self._edges: dict[str, list[str]] = {}
        self._reverse_edges: dict[str, list[str]] = {}

    def add_edge(self, source: str, target: str) -> None:
        """Record that ``source`` includes ``target``.

        Adding the same edge twice has no effect.
        """
        targets = self._edges.setdefault(source, [])
        if target not in targets:
            targets.append(target)

        sources = self._reverse_edges.setdefault(target, [])
        if source not in sources:
            sources.append(source)

    def clear(self) -> None:
        """Clear all data from the graph."""
        self._edges.clear()
        self._reverse_edges.clear()

    def get_direct_includes(self, path: str) -> list[str]:
        """Get the paths directly included by a file, in directive order."""
        return list(self._edges.get(path, []))

    def get_includers(self, path: str) -> list[str]:
        """Get the paths of files that include the given file."""
        return list(self._reverse_edges.get(path, []))

    def get_transitive_includes(self, path: str) -> list[str]:
        """Get all paths transitively included by a file.

        This performs a depth-first search to find all files reachable
        through include relationships. Cycles are handled by tracking
        visited nodes.

        Args:
            path: The path of the file.

        Returns:
            A list of paths that are transitively included (in dependency order).
        """
        result: list[str] = []
        visited: set[str] = {path}

        def dfs(current: str) -> None:
            for target in self.get_direct_includes(current):
                if target not in visited:
                    visited.add(target)
                    result.append(target)
                    dfs(target)

        dfs(path)
        return result

    def has_cycle(self, path: str) -> bool:
        """Check if there is a cycle reachable from the given path.

        Args:
            path: The starting path to check.

        Returns:
            True if a cycle is detected, False otherwise.
        """
        # Nodes on the current DFS path
        stack: set[str] = set()
        visited: set[str] = set()

        def dfs(current: str) -> bool:
            if current in stack:
                logger.warning(f"Circular include detected involving: {current}")
                return True

            if current in visited:
                return False

            stack.add(current)
            visited.add(current)

            for target in self.get_direct_includes(current):
                if dfs(target):
                    return True

            stack.remove(current)
            return False

        return dfs(path)
