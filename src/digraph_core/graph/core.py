# src/digraph_core/graph/core.py
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import graphblas as gb
from graphblas import Matrix, Vector

from digraph_core.exceptions import NodeNotFoundError
from digraph_core.helpers import has_self_loop, matrix_has_cycle, offdiagonal
from digraph_core.types import LNode, Node
from .graph_mask import GraphMask


class DiGraph:
    """
    Directed graph backed by python-graphblas.

    Structure:
      - Vertices are 0..num_vertices-1 internally; each vertex carries an
        opaque hashable key (the node identifier callers see).
      - Adjacency: one Matrix, matrix[i, j] stored  <=>  edge keys[i] -> keys[j].
        The stored value is the edge label (True for unlabelled edges).
        Self loops are allowed.
      - Node labels: mapping key -> arbitrary payload (missing means None).
      - Vertex mask: GraphMask of live vertices. Deleting nodes narrows the
        mask on a new view; matrix and keys are shared and never mutated,
        so every view behaves as an independent value.
    """

    __slots__ = (
        "_matrix",
        "_keys",      # tuple[Node, ...], index -> key
        "_index",     # dict[Node, int], key -> index
        "_labels",    # dict[Node, Any]
        "_mask",      # GraphMask
    )

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        matrix: Matrix,
        keys: Optional[Sequence[Node]] = None,
        *,
        labels: Optional[Mapping[Node, Any]] = None,
        mask: Optional[Vector] = None,
        _index: Optional[Dict[Node, int]] = None,
        _shared_labels: Optional[Dict[Node, Any]] = None,
    ) -> None:
        if matrix.nrows != matrix.ncols:
            raise ValueError(
                f"Adjacency matrix must be square, got {matrix.nrows}x{matrix.ncols}"
            )
        self._matrix = matrix

        num_vertices = matrix.nrows
        self._keys: Tuple[Node, ...] = tuple(range(num_vertices)) if keys is None else tuple(keys)
        if len(self._keys) != num_vertices:
            raise ValueError(
                f"Number of keys ({len(self._keys)}) must match num_vertices ({num_vertices})"
            )

        if _index is None:
            _index = {key: idx for idx, key in enumerate(self._keys)}
            if len(_index) != num_vertices:
                raise ValueError("Node keys must be unique.")
        self._index = _index

        if _shared_labels is not None:
            # views hand their labels dict on unchanged
            self._labels: Dict[Node, Any] = _shared_labels
        else:
            self._labels = dict(labels) if labels is not None else {}
            for key in self._labels:
                if key not in self._index:
                    raise ValueError(f"Label given for unknown node {key!r}")

        self._mask = GraphMask.full(num_vertices)
        if mask is not None:
            self.set_mask(mask)

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Any, ...]],
        *,
        nodes: Optional[Iterable[Node]] = None,
        labels: Optional[Mapping[Node, Any]] = None,
        dtype: Any = None,
        dup_op: Any = None,
    ) -> DiGraph:
        """
        Build a DiGraph from an edge list.

        edges:
            iterable of (source, target) or (source, target, value) tuples.
            Two-tuples are stored with value True.
        nodes:
            extra node keys, e.g. isolated vertices. They come first in
            vertex order, followed by label keys, then edge endpoints in
            order of first appearance.
        labels:
            mapping node key -> node label.
        dtype, dup_op:
            passed to Matrix.from_coo; without dup_op duplicate edges are an error.
        """
        keys: List[Node] = []
        index: Dict[Node, int] = {}

        def intern(key: Node) -> int:
            idx = index.get(key)
            if idx is None:
                idx = index[key] = len(keys)
                keys.append(key)
            return idx

        for key in nodes or ():
            intern(key)
        for key in labels or {}:
            intern(key)

        src: List[int] = []
        dst: List[int] = []
        vals: List[Any] = []
        for edge in edges:
            if len(edge) == 2:
                u, v = edge
                value: Any = True
            elif len(edge) == 3:
                u, v, value = edge
            else:
                raise ValueError(f"Edges must be (source, target[, value]) tuples, got {edge!r}")
            src.append(intern(u))
            dst.append(intern(v))
            vals.append(value)

        num_vertices = len(keys)
        src_arr = np.asarray(src, dtype=np.int64)
        dst_arr = np.asarray(dst, dtype=np.int64)
        val_arr = np.asarray(vals, dtype=dtype) if vals else np.empty(0, dtype=dtype or bool)

        mat = gb.Matrix.from_coo(
            src_arr,
            dst_arr,
            val_arr,
            nrows=num_vertices,
            ncols=num_vertices,
            dtype=dtype,
            dup_op=dup_op,
        )
        return cls(mat, keys, labels=labels, _index=index)

    # ------------------------------------------------------------------ #
    # Mask handling (public API: Vector; internal: GraphMask)
    # ------------------------------------------------------------------ #
    def set_mask(self, mask_vector: Optional[Vector]) -> None:
        """
        Set or clear the vertex mask.

        - mask_vector is a GraphBLAS Vector[BOOL] of size num_vertices;
          vertices with a stored True are live.
        - None makes every vertex live again.
        """
        if mask_vector is None:
            self._mask = GraphMask.full(self.num_vertices)
            return

        if mask_vector.dtype is not gb.dtypes.BOOL:
            raise TypeError(f"Mask vector must have BOOL dtype, got {mask_vector.dtype!r}")
        if mask_vector.size != self.num_vertices:
            raise ValueError(
                f"Mask size ({mask_vector.size}) must match num_vertices ({self.num_vertices})"
            )

        self._mask = GraphMask(mask_vector)

    @property
    def mask_vector(self) -> Vector:
        """Return the underlying GraphBLAS live-vertex vector."""
        return self._mask.vector

    @property
    def graph_mask(self) -> GraphMask:
        return self._mask

    # ------------------------------------------------------------------ #
    # Structural accessors
    # ------------------------------------------------------------------ #
    @property
    def num_vertices(self) -> int:
        """Number of vertex slots, including masked-out ones."""
        return self._matrix.nrows

    @property
    def num_nodes(self) -> int:
        """Number of live nodes."""
        return self._mask.count

    def __len__(self) -> int:
        return self.num_nodes

    def __contains__(self, node: object) -> bool:
        try:
            idx = self._index[node]  # type: ignore[index]
        except (KeyError, TypeError):
            return False
        return self._mask.contains(idx)

    @property
    def matrix(self) -> Matrix:
        """Full adjacency matrix (no masking applied)."""
        return self._matrix

    @property
    def keys(self) -> Tuple[Node, ...]:
        return self._keys

    @property
    def labels(self) -> Mapping[Node, Any]:
        """Read-only view of node key -> label (includes masked-out nodes)."""
        return MappingProxyType(self._labels)

    def index_of(self, node: Node) -> int:
        """Vertex index of a live node; NodeNotFoundError otherwise."""
        try:
            idx = self._index[node]
        except (KeyError, TypeError):
            raise NodeNotFoundError(node) from None
        if not self._mask.contains(idx):
            raise NodeNotFoundError(node)
        return idx

    def _to_keys(self, indices: np.ndarray) -> List[Node]:
        keys = self._keys
        return [keys[i] for i in indices.tolist()]

    # ------------------------------------------------------------------ #
    # Node queries
    # ------------------------------------------------------------------ #
    def nodes(self) -> List[Node]:
        """Live node keys in vertex order."""
        return self._to_keys(self._mask.indices())

    def lnodes(self) -> List[LNode]:
        """Live (key, label) pairs in vertex order."""
        return [(key, self._labels.get(key)) for key in self.nodes()]

    def label(self, node: Node) -> Any:
        self.index_of(node)
        return self._labels.get(node)

    def _pre_indices(self, idx: int) -> np.ndarray:
        col = self._matrix[:, idx].new(mask=self._mask.vector.S)
        return col.to_coo(values=False)[0]

    def _suc_indices(self, idx: int) -> np.ndarray:
        row = self._matrix[idx, :].new(mask=self._mask.vector.S)
        return row.to_coo(values=False)[0]

    def predecessors(self, node: Node) -> List[Node]:
        """Live nodes with an edge into node (node itself if it has a self loop)."""
        return self._to_keys(self._pre_indices(self.index_of(node)))

    def successors(self, node: Node) -> List[Node]:
        """Live nodes node has an edge to (node itself if it has a self loop)."""
        return self._to_keys(self._suc_indices(self.index_of(node)))

    def neighbors(self, node: Node) -> List[Node]:
        """Union of predecessors and successors, without duplicates."""
        idx = self.index_of(node)
        both = np.union1d(self._pre_indices(idx), self._suc_indices(idx))
        return self._to_keys(both)

    # ------------------------------------------------------------------ #
    # Edge queries
    # ------------------------------------------------------------------ #
    def _live_coo(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        rows, cols, vals = self._matrix.to_coo()
        alive = self._mask.as_array()
        keep = alive[rows] & alive[cols]
        return rows[keep], cols[keep], vals[keep]

    def edges(self) -> List[Tuple[Node, Node]]:
        """Edges between live nodes, as (source, target) pairs in row-major order."""
        rows, cols, _ = self._live_coo()
        return list(zip(self._to_keys(rows), self._to_keys(cols)))

    def labeled_edges(self) -> List[Tuple[Node, Node, Any]]:
        """Edges between live nodes, as (source, target, value) triples."""
        rows, cols, vals = self._live_coo()
        return list(zip(self._to_keys(rows), self._to_keys(cols), vals.tolist()))

    def has_cycle(self, *, ignore_self_loops: bool = False) -> bool:
        """True iff the live part of the graph contains a directed cycle."""
        mat = self._matrix
        if ignore_self_loops and has_self_loop(mat):
            mat = offdiagonal(mat)
        return matrix_has_cycle(mat, self._mask.vector)

    # ------------------------------------------------------------------ #
    # Derived graphs
    # ------------------------------------------------------------------ #
    def get_view(self, mask: Vector | None = None) -> DiGraph:
        """
        Return a shallow view of this graph sharing structure and labels,
        but with an optional different vertex mask.
        """
        mask_vec = self._mask.vector if mask is None else mask
        return DiGraph(
            self._matrix,
            self._keys,
            mask=mask_vec,
            _index=self._index,
            _shared_labels=self._labels,
        )

    def delete_nodes(self, nodes: Iterable[Node]) -> DiGraph:
        """
        Return a view without the given nodes and the edges touching them.

        Keys unknown to the graph (or already deleted) are ignored. This graph
        is left untouched.
        """
        indices = [self._index[node] for node in nodes if node in self._index]
        return self.get_view(self._mask.without(indices).vector)

    def isequal(self, other: DiGraph, *, compare_labels: bool = True) -> bool:
        """
        Structural equality over live nodes and the edges between them.

        With compare_labels, edge values and node labels must match as well.
        Views of the same graph (shared matrix, and shared labels when those
        are compared) are equal exactly when their masks are.
        """
        if self._matrix is other._matrix and (not compare_labels or self._labels is other._labels):
            return self._mask.isequal(other._mask)

        my_nodes = self.nodes()
        if self.num_nodes != other.num_nodes or set(my_nodes) != set(other.nodes()):
            return False

        if not compare_labels:
            return set(self.edges()) == set(other.edges())

        if set(self.labeled_edges()) != set(other.labeled_edges()):
            return False
        return all(_same_label(self._labels.get(key), other._labels.get(key)) for key in my_nodes)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def __repr__(self) -> str:
        return (
            f"DiGraph(num_vertices={self.num_vertices}, "
            f"num_nodes={self.num_nodes}, "
            f"num_edges={len(self._live_coo()[0])})"
        )


def _same_label(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)
