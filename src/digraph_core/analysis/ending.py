"""
Ending nodes.

A node is an ending node with respect to a direction when the nodes adjacent
to it in that direction are either none at all, or only the node itself (a
self loop does not count as an external connection).

    roots       ending by predecessors
    leaves      ending by successors
    singletons  ending by neighbors (isolated, up to a self loop)

Every entry point comes in an identifier flavour, taking or returning plain
node identifiers, and a labeled flavour working on (node, label) pairs.
Unknown nodes are not handled here: the graph's NodeNotFoundError propagates.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Set

from digraph_core.graph import DiGraph
from digraph_core.types import LNode, Node
from .utils import filter_lnodes, filter_nodes


class Direction(Enum):
    PREDECESSORS = "predecessors"
    SUCCESSORS = "successors"
    NEIGHBORS = "neighbors"

    def adjacent(self, graph: DiGraph, node: Node) -> List[Node]:
        """Nodes adjacent to node in this direction."""
        if self is Direction.PREDECESSORS:
            return graph.predecessors(node)
        if self is Direction.SUCCESSORS:
            return graph.successors(node)
        return graph.neighbors(node)


# -----------------------------------------------------------------------------
# Generic ending nodes
# -----------------------------------------------------------------------------

def is_ending_node(direction: Direction, graph: DiGraph, node: Node) -> bool:
    """Determine if this node is an ending node."""
    adjacent = direction.adjacent(graph, node)
    if not adjacent:
        return True
    if len(adjacent) == 1:
        # Allow loops
        return adjacent[0] == node
    return False


def is_ending_lnode(direction: Direction, graph: DiGraph, lnode: LNode) -> bool:
    """Determine if this labeled node is an ending node."""
    node, _ = lnode
    return is_ending_node(direction, graph, node)


def ending_nodes_by(direction: Direction, graph: DiGraph) -> Set[Node]:
    """All nodes that meet the ending criteria."""
    return filter_nodes(lambda g, n: is_ending_node(direction, g, n), graph)


def ending_lnodes_by(direction: Direction, graph: DiGraph) -> List[LNode]:
    """All labeled nodes that meet the ending criteria."""
    return filter_lnodes(lambda g, ln: is_ending_lnode(direction, g, ln), graph)


# -----------------------------------------------------------------------------
# Roots
# -----------------------------------------------------------------------------

def roots_of(graph: DiGraph) -> Set[Node]:
    return ending_nodes_by(Direction.PREDECESSORS, graph)


def labeled_roots_of(graph: DiGraph) -> List[LNode]:
    return ending_lnodes_by(Direction.PREDECESSORS, graph)


def is_root(graph: DiGraph, node: Node) -> bool:
    return is_ending_node(Direction.PREDECESSORS, graph, node)


def is_labeled_root(graph: DiGraph, lnode: LNode) -> bool:
    return is_ending_lnode(Direction.PREDECESSORS, graph, lnode)


# -----------------------------------------------------------------------------
# Leaves
# -----------------------------------------------------------------------------

def leaves_of(graph: DiGraph) -> Set[Node]:
    return ending_nodes_by(Direction.SUCCESSORS, graph)


def labeled_leaves_of(graph: DiGraph) -> List[LNode]:
    return ending_lnodes_by(Direction.SUCCESSORS, graph)


def is_leaf(graph: DiGraph, node: Node) -> bool:
    return is_ending_node(Direction.SUCCESSORS, graph, node)


def is_labeled_leaf(graph: DiGraph, lnode: LNode) -> bool:
    return is_ending_lnode(Direction.SUCCESSORS, graph, lnode)


# -----------------------------------------------------------------------------
# Singletons
# -----------------------------------------------------------------------------

def singletons_of(graph: DiGraph) -> Set[Node]:
    return ending_nodes_by(Direction.NEIGHBORS, graph)


def labeled_singletons_of(graph: DiGraph) -> List[LNode]:
    return ending_lnodes_by(Direction.NEIGHBORS, graph)


def is_singleton(graph: DiGraph, node: Node) -> bool:
    return is_ending_node(Direction.NEIGHBORS, graph, node)


def is_labeled_singleton(graph: DiGraph, lnode: LNode) -> bool:
    return is_ending_lnode(Direction.NEIGHBORS, graph, lnode)
