from __future__ import annotations

import json
import logging

import pytest

from nbsanity.logging import (
    _choose_formatter,
    _ConsoleFormatter,
    _parse_evt_fields,
    get_logger,
    init_logging,
    log_event,
)


def _record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="nbsanity",
        level=level,
        pathname="t",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_console_formatter_violation_line() -> None:
    msg = "nb_violation rule=NoEmptyCells file=a.ipynb cell=3 msg=Cell is empty"
    out = _ConsoleFormatter().format(_record(msg, logging.ERROR))
    assert "[ERROR]" in out
    assert "nb_violation" in out and "NoEmptyCells" in out
    # Free text after msg= stays together
    assert "Cell is empty" in out


def test_console_formatter_evt_line() -> None:
    out = _ConsoleFormatter().format(
        _record("EVT event=nb_run_done notebooks=3 violations=0 errors=0 outcome=PASS")
    )
    assert "[INFO]" in out and "nb_run_done" in out and "PASS" in out


def test_parse_evt_fields_types() -> None:
    fields = _parse_evt_fields("EVT event=x cell=4 rule=HasTitleCell junk =skip")
    assert fields == {"event": "x", "cell": 4, "rule": "HasTitleCell"}
    assert _parse_evt_fields("plain message") == {}


def test_json_formatter_expands_evt() -> None:
    f = _choose_formatter("json")
    payload = json.loads(f.format(_record("EVT event=nb_run_done notebooks=2 outcome=FAIL")))
    assert payload["message"] == "nb_run_done"
    assert payload["notebooks"] == 2 and payload["outcome"] == "FAIL"
    assert payload["level"] == "INFO" and payload["logger"] == "nbsanity"


def test_choose_formatter_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NBSANITY_LOG_JSON", raising=False)
    monkeypatch.setenv("NBSANITY_LOG_PRETTY", "1")
    assert isinstance(_choose_formatter("auto"), _ConsoleFormatter)
    monkeypatch.delenv("NBSANITY_LOG_PRETTY", raising=False)
    monkeypatch.setenv("NBSANITY_LOG_JSON", "yes")
    assert not isinstance(_choose_formatter("auto"), _ConsoleFormatter)


def test_env_level_and_single_handler(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    logger = get_logger()
    old_handlers = list(logger.handlers)
    old_level = logger.level
    try:
        monkeypatch.setenv("NBSANITY_LOG_LEVEL", "warning")
        assert init_logging("json").level == logging.WARNING
        monkeypatch.setenv("NBSANITY_LOG_LEVEL", "not-a-level")
        lg = init_logging("json")
        lg = init_logging("json")
        assert lg.level == logging.INFO
        assert sum(isinstance(h, logging.StreamHandler) for h in lg.handlers) == 1

        log_event("nb_checked", {"file": "my nb.ipynb", "violations": 2, "cell": True, "x": 1})
        payload = json.loads(capsys.readouterr().out.strip())
        assert payload["message"] == "nb_checked"
        assert payload["file"] == "my_nb.ipynb" and payload["violations"] == 2
        assert "cell" not in payload and "x" not in payload
    finally:
        logger.setLevel(old_level)
        logger.handlers = old_handlers
