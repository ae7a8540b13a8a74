from __future__ import annotations

from pathlib import Path

import pytest

from nbsanity.notebook import Cell, CodeCell, MarkdownCell, Notebook
from nbsanity.rules.execution_rules import CellExecutionIsSequential


def _nb(counts: list[int | None]) -> Notebook:
    cells: tuple[Cell, ...] = tuple(
        CodeCell(index=i, source=f"x{i} = {i}", execution_count=c) for i, c in enumerate(counts)
    )
    return Notebook(path=Path("exec.ipynb"), cells=cells)


def _check(nb: Notebook) -> list[str]:
    return [v.message for v in CellExecutionIsSequential().check(nb)]


@pytest.mark.parametrize(
    "counts",
    [[], [None], [1], [7], [None, None], [1, 2, 3, 4], [5, 6, 7], [1, None, 2, None, 3]],
)
def test_sequential_or_trivial_runs_pass(counts: list[int | None]) -> None:
    assert _check(_nb(counts)) == []


def test_skipped_count_cites_jump() -> None:
    out = list(CellExecutionIsSequential().check(_nb([1, None, 3])))
    assert len(out) == 1
    v = out[0]
    assert v.rule == "CellExecutionIsSequential"
    assert v.cell == 2
    assert "got 3 after 1" in v.message and "cell 0" in v.message and "expected 2" in v.message


@pytest.mark.parametrize(
    ("counts", "expected"),
    [
        ([2, 1], 1),
        ([1, 3, 4], 1),
        ([1, 2, 2], 1),
        ([3, 2, 1], 2),
        ([1, 5, 2, 3], 2),
    ],
)
def test_out_of_order_counts_fire_per_pair(counts: list[int | None], expected: int) -> None:
    assert len(_check(_nb(counts))) == expected


def test_markdown_cells_do_not_break_sequence() -> None:
    nb = Notebook(
        path=Path("mixed.ipynb"),
        cells=(
            CodeCell(index=0, source="a", execution_count=1),
            MarkdownCell(index=1, source="# Notes"),
            CodeCell(index=2, source="b", execution_count=2),
        ),
    )
    assert _check(nb) == []
