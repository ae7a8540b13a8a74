from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Final, Literal, Protocol, runtime_checkable

_LOGGER_NAME: Final[str] = "nbsanity"

# Structured EVT fields and the python type each one carries
_INT_FIELDS: Final[frozenset[str]] = frozenset({"cell", "violations", "notebooks", "errors"})
_STR_FIELDS: Final[frozenset[str]] = frozenset({"file", "rule", "outcome"})


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        msg = record.getMessage()
        extra = _parse_evt_fields(msg)
        if extra:
            if "event" in extra:
                payload["message"] = str(extra.pop("event"))
            for k, v in extra.items():
                payload[k] = v
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class _ConsoleFormatter(logging.Formatter):
    """Colorized formatter for interactive terminals.

    The first token without ``=`` is shown as the event name, ``key=value``
    tokens get colored keys, and anything else is appended as plain text.
    """

    _RESET = "\x1b[0m"
    _BOLD = "\x1b[1m"
    _DIM = "\x1b[2m"
    _FG_GRAY = "\x1b[90m"
    _FG_RED = "\x1b[91m"
    _FG_GREEN = "\x1b[92m"
    _FG_YELLOW = "\x1b[93m"
    _FG_BLUE_BRIGHT = "\x1b[94m"
    _FG_MAGENTA = "\x1b[95m"
    _FG_CYAN = "\x1b[36m"
    _FG_WHITE = "\x1b[97m"

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now(UTC).strftime("%H:%M:%S")
        lvl_tag = self._level_tag(record.levelno)

        msg = record.getMessage()
        event, kv_pairs, tail = self._split_message(msg)

        parts: list[str] = []
        parts.append(f"{self._DIM}[{ts}]{self._RESET}")
        parts.append(lvl_tag)
        if record.name and record.name != _LOGGER_NAME:
            parts.append(f"{self._DIM}{self._FG_GRAY}{record.name}{self._RESET}")
        if event:
            parts.append(f"{self._BOLD}{self._FG_BLUE_BRIGHT}{event}{self._RESET}")

        for k, v in kv_pairs:
            parts.append(f"{self._DIM}{self._FG_CYAN}{k}{self._RESET}={self._color_value(k, v)}")

        if tail:
            parts.append(tail)

        if record.exc_info:
            exc = self.formatException(record.exc_info)
            parts.append(f"\n{self._FG_RED}{exc}{self._RESET}")

        return " ".join(parts)

    def _level_tag(self, level: int) -> str:
        if level >= logging.CRITICAL:
            c = self._FG_MAGENTA
            name = "CRIT"
        elif level >= logging.ERROR:
            c = self._FG_RED
            name = "ERROR"
        elif level >= logging.WARNING:
            c = self._FG_YELLOW
            name = "WARN"
        elif level >= logging.INFO:
            c = self._FG_CYAN
            name = "INFO"
        else:
            c = self._FG_GRAY
            name = "DEBUG"
        return f"{self._BOLD}{c}[{name}]{self._RESET}"

    def _split_message(self, msg: str) -> tuple[str | None, list[tuple[str, str]], str | None]:
        if msg.startswith("EVT "):
            extra = _parse_evt_fields(msg)
            evt_name = str(extra.pop("event")) if "event" in extra else "event"
            kv_items: list[tuple[str, str]] = [(k, str(v)) for k, v in extra.items()]
            return evt_name, kv_items, None

        if not msg:
            return None, [], None
        toks = msg.split()
        if not toks:
            return None, [], msg

        event: str | None = None
        rest = toks
        if "=" not in toks[0]:
            event = toks[0]
            rest = toks[1:]

        kv: list[tuple[str, str]] = []
        tail_parts: list[str] = []
        for i, t in enumerate(rest):
            # msg= is always last and its value may contain spaces
            if t.startswith("msg="):
                kv.append(("msg", " ".join(rest[i:])[4:]))
                break
            if "=" in t:
                k, v = t.split("=", 1)
                k = k.strip()
                if k:
                    kv.append((k, v))
                else:
                    tail_parts.append(t)
            else:
                tail_parts.append(t)

        tail = " ".join(tail_parts) if tail_parts else None
        return event, kv, tail

    def _color_value(self, key: str, v: str) -> str:
        ks = key.lower()
        vs = v.strip()
        if ks == "rule":
            return f"{self._FG_YELLOW}{vs}{self._RESET}"
        if ks == "outcome":
            c = self._FG_GREEN if vs.upper() == "PASS" else self._FG_RED
            return f"{self._BOLD}{c}{vs}{self._RESET}"
        if vs.lower() in {"true", "false"}:
            return f"{self._FG_CYAN}{vs}{self._RESET}"
        if vs.isdigit():
            return f"{self._FG_GREEN}{vs}{self._RESET}"
        return f"{self._FG_WHITE}{vs}{self._RESET}"


def log_event(event: str, fields: Mapping[str, object] | None = None) -> None:
    logger = get_logger()
    parts: list[str] = [f"event={event}"]
    if fields is not None:
        for key, val in fields.items():
            if key in _INT_FIELDS and isinstance(val, int) and not isinstance(val, bool):
                parts.append(f"{key}={val}")
            elif key in _STR_FIELDS and isinstance(val, str):
                # Avoid spaces in value
                parts.append(f"{key}={val.replace(' ', '_')}")
    logger.info("EVT " + " ".join(parts))


def _parse_evt_fields(msg: str) -> dict[str, object]:
    if not msg.startswith("EVT "):
        return {}
    out: dict[str, object] = {}
    body = msg[4:]
    for tok in body.split():
        if "=" not in tok:
            continue
        k, v = tok.split("=", 1)
        key = k.strip()
        if not key:
            continue
        val: object = v
        if key in _INT_FIELDS and v.isdigit():
            val = int(v)
        out[key] = val
    return out


LogStyle = Literal["json", "pretty", "auto"]


def _env_level() -> int:
    v = os.environ.get("NBSANITY_LOG_LEVEL")
    if not v:
        return logging.INFO
    m = v.strip().upper()
    return {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }.get(m, logging.INFO)


def init_logging(style: LogStyle = "auto") -> logging.Logger:
    """Initialize or refresh the project logger.

    Re-binds the handler to the current ``sys.stdout`` on every call so that
    replaced streams (pytest capsys) receive output, and keeps exactly one
    StreamHandler on the logger.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    lvl = _env_level()
    logger.setLevel(lvl)
    logger.propagate = _env_truthy("NBSANITY_LOG_PROPAGATE")

    formatter = _choose_formatter(style)
    for h in list(logger.handlers):
        if isinstance(h, logging.StreamHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(lvl)
    logger.addHandler(handler)

    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def _env_truthy(name: str) -> bool:
    v = os.environ.get(name)
    if not v:
        return False
    return v.strip().lower() in {"1", "true", "yes", "on", "y"}


def _choose_formatter(style: LogStyle = "auto") -> logging.Formatter:
    if style == "json":
        return _JsonFormatter()
    if style == "pretty":
        return _ConsoleFormatter()

    # Auto: honor env and TTY
    force_json = _env_truthy("NBSANITY_LOG_JSON")
    force_pretty = _env_truthy("NBSANITY_LOG_PRETTY")

    @runtime_checkable
    class _HasIsatty(Protocol):
        def isatty(self) -> bool: ...

    out_stream = sys.stdout
    is_tty = isinstance(out_stream, _HasIsatty) and bool(out_stream.isatty())
    if not force_json and (force_pretty or is_tty):
        return _ConsoleFormatter()
    return _JsonFormatter()
