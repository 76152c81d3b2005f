"""
digraph_core.graph
==================

Directed-graph collaborator used by the analysis routines.

Public API (this subpackage):

- DiGraph   : in-memory directed graph (GraphBLAS adjacency, node keys,
              node labels, live-vertex mask).
- GraphMask : boolean live-vertex mask; deleting nodes yields a narrower mask
              on a new view instead of mutating the graph.
"""

from __future__ import annotations

from .core import DiGraph
from .graph_mask import GraphMask

__all__ = [
    "DiGraph",
    "GraphMask",
]
