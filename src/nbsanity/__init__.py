from __future__ import annotations

from .engine import NotebookResult, Outcome, Report, analyze, check_path, run
from .errors import ConfigError, ErrorCode, NbSanityError, ParseError
from .notebook import CodeCell, MarkdownCell, Notebook, OtherCell
from .rules import Rule, Violation
from .rules.registry import RULES, rule_names

__all__ = [
    "RULES",
    "CodeCell",
    "ConfigError",
    "ErrorCode",
    "MarkdownCell",
    "NbSanityError",
    "Notebook",
    "NotebookResult",
    "OtherCell",
    "Outcome",
    "ParseError",
    "Report",
    "Rule",
    "Violation",
    "analyze",
    "check_path",
    "rule_names",
    "run",
]
