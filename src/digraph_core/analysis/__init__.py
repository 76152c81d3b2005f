from __future__ import annotations

from .core import core_of, strip_ends
from .ending import (
    Direction,
    ending_lnodes_by,
    ending_nodes_by,
    is_ending_lnode,
    is_ending_node,
    is_labeled_leaf,
    is_labeled_root,
    is_labeled_singleton,
    is_leaf,
    is_root,
    is_singleton,
    labeled_leaves_of,
    labeled_roots_of,
    labeled_singletons_of,
    leaves_of,
    roots_of,
    singletons_of,
)
from .utils import filter_lnodes, filter_nodes, fix_point_graphs

__all__ = [
    "Direction",
    "is_ending_node",
    "is_ending_lnode",
    "ending_nodes_by",
    "ending_lnodes_by",
    "roots_of",
    "labeled_roots_of",
    "is_root",
    "is_labeled_root",
    "leaves_of",
    "labeled_leaves_of",
    "is_leaf",
    "is_labeled_leaf",
    "singletons_of",
    "labeled_singletons_of",
    "is_singleton",
    "is_labeled_singleton",
    "strip_ends",
    "core_of",
    "filter_nodes",
    "filter_lnodes",
    "fix_point_graphs",
]
