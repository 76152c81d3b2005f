from __future__ import annotations

import logging
from typing import Optional

from digraph_core.config import get_settings
from digraph_core.graph import DiGraph
from .ending import leaves_of, roots_of
from .utils import fix_point_graphs

logger = logging.getLogger(__name__)


def strip_ends(graph: DiGraph) -> DiGraph:
    """Delete all current roots and leaves of graph (one peel)."""
    roots = roots_of(graph)
    leaves = leaves_of(graph)
    stripped = graph.delete_nodes(roots | leaves)
    logger.debug(
        "Stripped %d roots and %d leaves; %d of %d nodes remain.",
        len(roots),
        len(leaves),
        stripped.num_nodes,
        graph.num_nodes,
    )
    return stripped


def core_of(graph: DiGraph, *, compare_labels: Optional[bool] = None) -> DiGraph:
    """
    The core of the graph: what is left after repeatedly deleting all roots and
    leaves until none remain. It holds every cycle and the paths between them,
    i.e. the part of the graph where the work is done.

    Each peel either removes a node or ends the loop, so there are at most
    len(graph) + 1 peels. graph itself is never modified.

    compare_labels:
        passed to DiGraph.isequal when checking for the fixpoint; defaults to
        the `analysis.compare_labels` setting.
    """
    if compare_labels is None:
        compare_labels = get_settings().analysis.compare_labels

    core = fix_point_graphs(strip_ends, graph, compare_labels=compare_labels)
    logger.debug("Core has %d of %d nodes.", core.num_nodes, graph.num_nodes)
    return core
