from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import graphblas as gb
from graphblas import Vector


class GraphMask:
    """
    Boolean vertex mask marking the live vertices of a DiGraph.

    - Wraps a python-graphblas Vector[BOOL]; only True entries are stored,
      so the mask can be used structurally (``mask.vector.S``).
    - Immutable by convention: narrowing returns a new GraphMask, so views
      holding the old mask are unaffected.
    """

    __slots__ = ("vector", "_array")

    def __init__(self, vector: Vector) -> None:
        if vector.dtype is not gb.dtypes.BOOL:
            raise TypeError(f"GraphMask vector must have BOOL dtype, got {vector.dtype!r}")
        # Drop explicit False entries
        self.vector = vector.select("==", True).new()
        self._array: Optional[np.ndarray] = None

    @classmethod
    def full(cls, size: int) -> GraphMask:
        """Mask with every vertex 0..size-1 live."""
        return cls(Vector.from_scalar(True, size, dtype=gb.dtypes.BOOL))

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    @property
    def size(self) -> int:
        return self.vector.size

    @property
    def count(self) -> int:
        """Number of live vertices."""
        return self.vector.nvals

    def indices(self) -> np.ndarray:
        """Sorted indices of the live vertices."""
        idx, _ = self.vector.to_coo(values=False)
        return idx

    def as_array(self) -> np.ndarray:
        """Dense numpy bool array of length size; computed once."""
        if self._array is None:
            arr = np.zeros(self.size, dtype=bool)
            arr[self.indices()] = True
            self._array = arr
        return self._array

    def contains(self, vertex_index: int) -> bool:
        return 0 <= vertex_index < self.size and bool(self.as_array()[vertex_index])

    def isequal(self, other: GraphMask) -> bool:
        return self.size == other.size and self.vector.isequal(other.vector)

    # ------------------------------------------------------------------ #
    # Derivation
    # ------------------------------------------------------------------ #
    def without(self, vertex_indices: Iterable[int]) -> GraphMask:
        """
        Return a new mask with the given vertices switched off.

        Indices that are already dead are ignored; out-of-range indices raise
        IndexError.
        """
        idx_arr = np.fromiter((int(i) for i in vertex_indices), dtype=np.int64)
        if idx_arr.size == 0:
            return self
        if (idx_arr < 0).any() or (idx_arr >= self.size).any():
            raise IndexError(f"Vertex indices must be in [0, {self.size})")

        idx_arr = np.unique(idx_arr)
        removed = Vector.from_coo(
            idx_arr,
            np.ones(idx_arr.size, dtype=bool),
            size=self.size,
            dtype=gb.dtypes.BOOL,
        )

        kept = Vector(gb.dtypes.BOOL, size=self.size)
        kept(mask=~removed.S) << self.vector
        return GraphMask(kept)

    def __repr__(self) -> str:
        return f"GraphMask(size={self.size}, count={self.count})"
