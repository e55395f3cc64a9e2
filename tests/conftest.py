"""Shared fixtures for the test suite."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable

import pytest

from sssp.config import reset_config
from sssp.container import reset_container
from sssp.graph import Graph, GraphBuilder, build_graph


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop SSSP_* variables and cached config so tests see defaults."""
    for key in list(os.environ):
        if key.startswith("SSSP_"):
            monkeypatch.delenv(key)
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def triangle() -> Graph:
    """A-B-C with a heavy direct A-C edge."""
    return build_graph([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])


@pytest.fixture
def triangle_with_island() -> Graph:
    """The triangle plus a vertex D without edges."""
    builder = GraphBuilder()
    builder.add_rows([("A", "B", 1), ("B", "C", 1), ("A", "C", 5)])
    builder.add_vertex("D")
    return builder.build()


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write lines to a CSV file under tmp_path and return its path."""

    def _write(lines: Iterable[str], name: str = "edges.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
