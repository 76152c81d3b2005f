import graphblas as gb
from graphblas import Vector
import pytest

from digraph_core.graph import GraphMask


def test_full_mask() -> None:
    mask = GraphMask.full(4)

    assert mask.size == 4
    assert mask.count == 4
    assert mask.indices().tolist() == [0, 1, 2, 3]
    assert mask.as_array().tolist() == [True, True, True, True]


def test_explicit_false_entries_are_dropped() -> None:
    vec = Vector.from_coo([0, 1, 2], [True, False, True], size=4)
    mask = GraphMask(vec)

    assert mask.count == 2
    assert mask.indices().tolist() == [0, 2]
    assert mask.contains(0)
    assert not mask.contains(1)
    assert not mask.contains(3)
    assert not mask.contains(-1)
    assert not mask.contains(10)


def test_rejects_non_bool_vector() -> None:
    with pytest.raises(TypeError):
        GraphMask(Vector.from_coo([0], [1], size=2))


def test_without_returns_new_mask() -> None:
    mask = GraphMask.full(5)

    narrowed = mask.without([1, 3, 3])

    assert narrowed.indices().tolist() == [0, 2, 4]
    assert narrowed is not mask
    assert mask.count == 5

    # Removing already dead vertices is a no-op
    again = narrowed.without([1])
    assert again.isequal(narrowed)

    # Removing nothing hands back the same mask
    assert narrowed.without([]) is narrowed


def test_without_rejects_out_of_range() -> None:
    mask = GraphMask.full(3)

    with pytest.raises(IndexError):
        mask.without([3])
    with pytest.raises(IndexError):
        mask.without([-1])


def test_isequal() -> None:
    a = GraphMask(Vector.from_coo([0, 2], [True, True], size=3, dtype=gb.dtypes.BOOL))
    b = GraphMask.full(3).without([1])
    c = GraphMask.full(4).without([1, 3])

    assert a.isequal(b)
    assert not a.isequal(c)
