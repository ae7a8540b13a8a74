from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ..notebook import Notebook


@dataclass(frozen=True)
class Violation:
    path: Path
    rule: str
    message: str
    # None for findings about the notebook as a whole
    cell: int | None = None


@dataclass(frozen=True)
class RuleReport:
    name: str
    violations: int


class Rule(Protocol):
    name: str

    def check(self, notebook: Notebook) -> Iterator[Violation]: ...
