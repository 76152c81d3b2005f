"""
Shared graph fixtures, and isolation of the cached settings from the
environment of whoever runs the suite.
"""
from __future__ import annotations

from typing import Iterator

import pytest

from digraph_core.config import clear_settings_cache
from digraph_core.graph import DiGraph


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> Iterator[None]:
    # No config.toml / .env from the developer's CWD leaks into tests.
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    for var in ("DIGRAPH_CORE_ANALYSIS__COMPARE_LABELS", "DIGRAPH_CORE_LOGGING__LEVEL"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def chain() -> DiGraph:
    """a -> b -> c"""
    return DiGraph.from_edges([("a", "b"), ("b", "c")])


@pytest.fixture
def cycle() -> DiGraph:
    """a -> b -> c -> a"""
    return DiGraph.from_edges([("a", "b"), ("b", "c"), ("c", "a")])


@pytest.fixture
def empty() -> DiGraph:
    return DiGraph.from_edges([])


@pytest.fixture
def mixed() -> DiGraph:
    """
    A cycle x <-> y with a tail feeding in and a tail draining out, a
    self-looped isolated node, a plain isolated node and a bidirectional pair.

        s -> t -> x -> y -> x
                  y -> u -> v
        loop -> loop
        alone
        p <-> q
    """
    return DiGraph.from_edges(
        [
            ("s", "t"),
            ("t", "x"),
            ("x", "y"),
            ("y", "x"),
            ("y", "u"),
            ("u", "v"),
            ("loop", "loop"),
            ("p", "q"),
            ("q", "p"),
        ],
        nodes=["alone"],
        labels={"s": "source", "x": {"kind": "hub"}, "alone": 7},
    )
