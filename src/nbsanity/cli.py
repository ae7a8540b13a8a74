from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path

from .config import Settings
from .discovery import find_notebooks
from .engine import Outcome, Report, run
from .errors import ConfigError
from .logging import get_logger, init_logging, log_event
from .rules.registry import closest_rule_name, unknown_rule_names
from .version import get_version

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def _positive_int(text: str) -> int:
    if not text.isdigit() or int(text) < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text!r}")
    return int(text)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="nbsanity", description="The blazingly fast linter for Jupyter notebooks"
    )
    ap.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Notebooks or directories to check (default: configured root)",
    )
    ap.add_argument("--quiet", "-q", action="store_true", help="Don't report passing notebooks")
    ap.add_argument("--verbose", "-v", action="store_true", help="Show per-rule summary")
    ap.add_argument("--jobs", "-j", type=_positive_int, default=None, help="Worker threads")
    ap.add_argument("--config", type=Path, default=None, help="Path to pyproject.toml")
    ap.add_argument(
        "--log-format", choices=("auto", "json", "pretty"), default="auto", help="Log output style"
    )
    ap.add_argument("--version", action="store_true", help="Show version and exit")
    return ap


def _warn_unknown(disabled: frozenset[str]) -> None:
    log = get_logger()
    for name in unknown_rule_names(disabled):
        closest = closest_rule_name(name)
        if closest is not None:
            log.warning("nb_unknown_rule name=%s suggestion=%s", name, closest)
        else:
            log.warning("nb_unknown_rule name=%s", name)


def _print_summary(report: Report, quiet: bool, verbose: bool) -> None:
    log = get_logger()
    for res in report.results:
        if res.error is not None:
            log.error(
                "nb_parse_error file=%s code=%s msg=%s",
                res.path,
                res.error.code.value,
                res.error.message,
            )
        for v in res.violations:
            log.error(
                "nb_violation rule=%s file=%s cell=%s msg=%s",
                v.rule,
                v.path,
                "-" if v.cell is None else v.cell,
                v.message,
            )
        if res.ok and not quiet:
            log.info("nb_ok file=%s", res.path)
    if verbose:
        for rep in report.summary():
            log.info("nb_rule name=%s violations=%d", rep.name, rep.violations)
    log_event(
        "nb_run_done",
        {
            "notebooks": len(report.results),
            "violations": len(report.violations),
            "errors": len(report.errors),
            "outcome": report.outcome.value,
        },
    )


def main(argv: Iterable[str] | None = None) -> int:
    args = _build_parser().parse_args(list(argv) if argv is not None else None)
    init_logging(args.log_format)
    log = get_logger()
    if args.version:
        log.info("nbsanity version=%s", get_version())
        return EXIT_OK
    try:
        settings = Settings.load(args.config)
    except ConfigError as exc:
        log.error("nb_config_error msg=%s", exc.message)
        return EXIT_CONFIG
    _warn_unknown(settings.disable)

    paths: list[Path] = list(args.paths)
    roots = paths if paths else [settings.root]
    jobs = args.jobs if args.jobs is not None else settings.jobs
    notebooks = find_notebooks(roots)
    if not notebooks:
        log.warning("nb_none_found roots=%s", ",".join(str(r) for r in roots))
    report = run(notebooks, settings.disable, jobs=jobs)
    _print_summary(report, quiet=bool(args.quiet), verbose=bool(args.verbose))
    return EXIT_OK if report.outcome is Outcome.PASS else EXIT_FAILED
