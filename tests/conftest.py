from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import nbformat
import pytest
from nbformat.notebooknode import NotebookNode


@pytest.fixture
def write_notebook(tmp_path: Path) -> Callable[[str, list[NotebookNode]], Path]:
    """Write an nbformat 4 notebook under tmp_path and return its path."""

    def _write(name: str, cells: list[NotebookNode]) -> Path:
        nb = nbformat.v4.new_notebook(cells=cells)
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(nbformat.writes(nb), encoding="utf-8")
        return p

    return _write
