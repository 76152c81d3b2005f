try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .analysis import (
    Direction,
    core_of,
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
from .exceptions import DigraphCoreError, NodeNotFoundError
from .graph import DiGraph

__all__ = [
    "__version__",
    "DiGraph",
    "Direction",
    "DigraphCoreError",
    "NodeNotFoundError",
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
    "core_of",
]
