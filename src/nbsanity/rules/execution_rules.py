from __future__ import annotations

from collections.abc import Iterator

from ..notebook import Notebook
from . import Violation


class CellExecutionIsSequential:
    """Code cells must have been run top to bottom in a single pass.

    Only cells that carry an execution count take part; a never-executed cell
    is skipped rather than treated as a gap. Each adjacent pair of counts that
    does not step by exactly one is reported against the later cell.
    """

    name = "CellExecutionIsSequential"

    def check(self, notebook: Notebook) -> Iterator[Violation]:
        executed = [
            (c.index, c.execution_count)
            for c in notebook.code_cells()
            if c.execution_count is not None
        ]
        for (prev_idx, prev_count), (idx, count) in zip(executed, executed[1:]):
            if count != prev_count + 1:
                yield Violation(
                    notebook.path,
                    self.name,
                    f"Not executed in order, got {count} after {prev_count} "
                    f"in cell {prev_idx} (expected {prev_count + 1})",
                    cell=idx,
                )
