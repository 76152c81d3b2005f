from __future__ import annotations

from typing import Hashable


class DigraphCoreError(Exception):
    pass


class NodeNotFoundError(DigraphCoreError, KeyError):
    """Raised when a node identifier is unknown to a graph or masked out of it."""

    def __init__(self, node: Hashable) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"node {self.node!r} not found in graph"
