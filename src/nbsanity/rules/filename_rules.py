from __future__ import annotations

import re
from collections.abc import Iterator

from ..notebook import Notebook
from . import Violation


class FileNotNamedUntitled:
    name = "FileNotNamedUntitled"

    _pat_untitled = re.compile(r"untitled\d*", re.IGNORECASE)

    def check(self, notebook: Notebook) -> Iterator[Violation]:
        stem = notebook.path.stem
        if self._pat_untitled.fullmatch(stem):
            yield Violation(
                notebook.path,
                self.name,
                f"Notebook has a default name '{notebook.name}', give it a descriptive one",
            )
