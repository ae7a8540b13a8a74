from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .errors import ParseError
from .logging import get_logger
from .notebook import Notebook
from .rules import Rule, RuleReport, Violation
from .rules.registry import RULES


class Outcome(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class NotebookResult:
    path: Path
    violations: tuple[Violation, ...] = ()
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and not self.violations


@dataclass
class Report:
    """Everything found in one run, in the order notebooks were given."""

    results: list[NotebookResult] = field(default_factory=list)

    def add(self, result: NotebookResult) -> None:
        self.results.append(result)

    @property
    def violations(self) -> list[Violation]:
        return [v for r in self.results for v in r.violations]

    @property
    def errors(self) -> list[ParseError]:
        return [r.error for r in self.results if r.error is not None]

    @property
    def outcome(self) -> Outcome:
        if self.violations or self.errors:
            return Outcome.FAIL
        return Outcome.PASS

    def summary(self, rules: Sequence[Rule] = RULES) -> list[RuleReport]:
        counts: dict[str, int] = {r.name: 0 for r in rules}
        for v in self.violations:
            counts[v.rule] = counts.get(v.rule, 0) + 1
        return [RuleReport(name=k, violations=n) for k, n in counts.items()]


def analyze(
    notebook: Notebook,
    disabled: frozenset[str] = frozenset(),
    rules: Sequence[Rule] = RULES,
) -> list[Violation]:
    out: list[Violation] = []
    for rule in rules:
        # Disabled rules are never invoked
        if rule.name in disabled:
            continue
        out.extend(rule.check(notebook))
    return out


def check_path(
    path: Path,
    disabled: frozenset[str] = frozenset(),
    rules: Sequence[Rule] = RULES,
) -> NotebookResult:
    try:
        notebook = Notebook.from_path(path)
    except ParseError as exc:
        get_logger().debug("nb_parse_failed file=%s code=%s", path, exc.code.value)
        return NotebookResult(path=path, error=exc)
    return NotebookResult(path=path, violations=tuple(analyze(notebook, disabled, rules)))


def run(
    paths: Sequence[Path],
    disabled: frozenset[str] = frozenset(),
    rules: Sequence[Rule] = RULES,
    jobs: int = 1,
) -> Report:
    def _check(p: Path) -> NotebookResult:
        return check_path(p, disabled, rules)

    if jobs > 1 and len(paths) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            results = list(pool.map(_check, paths))
    else:
        results = [_check(p) for p in paths]

    # Merge on the calling thread so ordering follows the input paths
    report = Report()
    for res in results:
        report.add(res)
    return report
