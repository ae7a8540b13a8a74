from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Final


class ErrorCode(str, Enum):
    invalid_json = "invalid_json"
    missing_field = "missing_field"
    invalid_field = "invalid_field"
    unsupported_format = "unsupported_format"
    unreadable = "unreadable"
    invalid_config = "invalid_config"


_DEFAULT_MESSAGE: Final[dict[ErrorCode, str]] = {
    ErrorCode.invalid_json: "Notebook is not valid JSON.",
    ErrorCode.missing_field: "Notebook is missing a required field.",
    ErrorCode.invalid_field: "Notebook field has an unexpected type.",
    ErrorCode.unsupported_format: "Unsupported notebook format version.",
    ErrorCode.unreadable: "Notebook file could not be read.",
    ErrorCode.invalid_config: "Invalid nbsanity configuration.",
}


def default_message(code: ErrorCode) -> str:
    return _DEFAULT_MESSAGE.get(code, "")


class NbSanityError(Exception):
    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        msg = message if message is not None else default_message(code)
        super().__init__(msg)
        self.code = code
        self.message = msg


class ParseError(NbSanityError):
    """A notebook file that is not usable notebook-format JSON."""

    def __init__(self, code: ErrorCode, path: Path, message: str | None = None) -> None:
        super().__init__(code, message)
        self.path = path

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class ConfigError(NbSanityError):
    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.invalid_config, message)
