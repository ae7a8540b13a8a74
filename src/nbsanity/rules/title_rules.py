from __future__ import annotations

import re
from collections.abc import Iterator

from ..notebook import MarkdownCell, Notebook
from . import Violation


class HasTitleCell:
    name = "HasTitleCell"

    _pat_header = re.compile(r"#+\s")

    def check(self, notebook: Notebook) -> Iterator[Violation]:
        if any(self._is_title(c) for c in notebook.markdown_cells()):
            return
        yield Violation(
            notebook.path,
            self.name,
            "No markdown cell starts with a header such as '# Title'",
        )

    def _is_title(self, cell: MarkdownCell) -> bool:
        lines = cell.source.strip().splitlines()
        # strip() already dropped leading blank lines
        return bool(lines) and self._pat_header.match(lines[0]) is not None
