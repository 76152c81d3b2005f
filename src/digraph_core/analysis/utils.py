from __future__ import annotations

from typing import Callable, List, Set

from digraph_core.graph import DiGraph
from digraph_core.types import LNode, Node


def filter_nodes(predicate: Callable[[DiGraph, Node], bool], graph: DiGraph) -> Set[Node]:
    """Set of node identifiers of graph satisfying predicate(graph, node)."""
    return {node for node in graph.nodes() if predicate(graph, node)}


def filter_lnodes(predicate: Callable[[DiGraph, LNode], bool], graph: DiGraph) -> List[LNode]:
    """Labeled nodes of graph satisfying predicate(graph, lnode), in graph order."""
    return [lnode for lnode in graph.lnodes() if predicate(graph, lnode)]


def fix_point_graphs(
    step: Callable[[DiGraph], DiGraph],
    graph: DiGraph,
    *,
    compare_labels: bool = True,
) -> DiGraph:
    """
    Apply step repeatedly until the result is structurally equal to its input.

    Only terminates if step eventually stops changing the graph.
    """
    current = graph
    while True:
        following = step(current)
        if following.isequal(current, compare_labels=compare_labels):
            return following
        current = following
