from __future__ import annotations

from pathlib import Path

import pytest

from nbsanity.notebook import Notebook
from nbsanity.rules.filename_rules import FileNotNamedUntitled


def _nb(name: str) -> Notebook:
    return Notebook(path=Path("work") / name, cells=())


@pytest.mark.parametrize(
    "name",
    ["Untitled.ipynb", "untitled.ipynb", "UNTITLED.ipynb", "Untitled1.ipynb", "Untitled42.ipynb"],
)
def test_default_names_fire_once(name: str) -> None:
    out = list(FileNotNamedUntitled().check(_nb(name)))
    assert len(out) == 1
    v = out[0]
    assert v.rule == "FileNotNamedUntitled" and v.cell is None
    assert v.path == Path("work") / name
    assert name in v.message


@pytest.mark.parametrize(
    "name",
    ["analysis.ipynb", "Untitled-1.ipynb", "untitled_draft.ipynb", "my_untitled.ipynb", "1.ipynb"],
)
def test_descriptive_names_pass(name: str) -> None:
    assert list(FileNotNamedUntitled().check(_nb(name))) == []


def test_directory_name_is_ignored() -> None:
    nb = Notebook(path=Path("Untitled") / "report.ipynb", cells=())
    assert list(FileNotNamedUntitled().check(nb)) == []
