from __future__ import annotations

import difflib
from typing import Final

from . import Rule
from .empty_rules import NoEmptyCells
from .execution_rules import CellExecutionIsSequential
from .filename_rules import FileNotNamedUntitled
from .title_rules import HasTitleCell

# Fixed order; engine output follows it
RULES: Final[tuple[Rule, ...]] = (
    FileNotNamedUntitled(),
    CellExecutionIsSequential(),
    NoEmptyCells(),
    HasTitleCell(),
)


def rule_names(rules: tuple[Rule, ...] = RULES) -> list[str]:
    return [r.name for r in rules]


def closest_rule_name(name: str, rules: tuple[Rule, ...] = RULES) -> str | None:
    matches = difflib.get_close_matches(name, rule_names(rules), n=1, cutoff=0.5)
    return matches[0] if matches else None


def unknown_rule_names(names: frozenset[str], rules: tuple[Rule, ...] = RULES) -> list[str]:
    known = set(rule_names(rules))
    return sorted(n for n in names if n not in known)
