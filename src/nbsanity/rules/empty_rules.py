from __future__ import annotations

from collections.abc import Iterator

from ..notebook import CodeCell, MarkdownCell, Notebook
from . import Violation


class NoEmptyCells:
    name = "NoEmptyCells"

    def check(self, notebook: Notebook) -> Iterator[Violation]:
        for cell in notebook.cells:
            # raw and other cell kinds are not checked
            if not isinstance(cell, CodeCell | MarkdownCell):
                continue
            if not cell.source.strip():
                yield Violation(notebook.path, self.name, "Cell is empty", cell=cell.index)
