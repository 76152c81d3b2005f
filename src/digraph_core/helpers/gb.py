# src/digraph_core/helpers/gb.py
from __future__ import annotations

from graphblas import Matrix, Vector, dtypes, semiring, unary


def has_self_loop(M: Matrix) -> bool:
    if M.nrows != M.ncols:
        raise ValueError("Adjacency matrix must be square")
    diag = M.diag()  # Vector over the diagonal entries
    # Any stored diagonal entry is a self loop
    return diag.nvals > 0


def offdiagonal(M: Matrix) -> Matrix:
    """Return a copy of M with all self loops (diagonal entries) removed."""
    if M.nrows != M.ncols:
        raise ValueError("Adjacency matrix must be square")
    return M.select("offdiag").new()


def matrix_has_cycle(M: Matrix, mask: Vector | None = None) -> bool:
    """
    Return True iff the directed graph represented by adjacency matrix M
    contains a directed cycle (including self-loops).

    - M is n x n (square).
    - Any stored entry is treated as an edge (pattern-only), whatever its value.
    - mask, if given, is a Vector[BOOL] restricting the graph to the vertices
      it stores.

    Vertices without live predecessors are peeled off repeatedly; the graph is
    acyclic iff this empties it.
    """
    n = M.nrows
    if M.ncols != n:
        raise ValueError("matrix must be square")

    A = M.apply(unary.one).new(dtype=dtypes.BOOL)

    if mask is None:
        alive = Vector.from_scalar(True, n, dtype=dtypes.BOOL)
    else:
        if mask.size != n:
            raise ValueError(f"mask size ({mask.size}) must match matrix size ({n})")
        alive = mask.dup(dtype=dtypes.BOOL)

    while alive.nvals > 0:
        # vertices reachable in one hop from a live vertex
        reached = semiring.lor_land(alive @ A).new()

        sources = Vector(dtypes.BOOL, size=n)
        sources(mask=~reached.S) << alive
        if sources.nvals == 0:
            return True

        remaining = Vector(dtypes.BOOL, size=n)
        remaining(mask=~sources.S) << alive
        alive = remaining

    return False
