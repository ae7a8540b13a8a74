from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Final

import nbformat

from .errors import ErrorCode, ParseError

_CURRENT_MAJOR: Final[int] = 4
_LEGACY_MAJOR: Final[int] = 3


@dataclass(frozen=True)
class CodeCell:
    index: int
    source: str
    # None when the cell was never executed
    execution_count: int | None


@dataclass(frozen=True)
class MarkdownCell:
    index: int
    source: str


@dataclass(frozen=True)
class OtherCell:
    index: int
    cell_type: str
    source: str


Cell = CodeCell | MarkdownCell | OtherCell


@dataclass(frozen=True)
class Notebook:
    """Read-only view of the parts of an .ipynb document that rules inspect.

    Cells keep their on-disk order; empty and whitespace-only cells are kept.
    """

    path: Path
    cells: tuple[Cell, ...]

    @property
    def name(self) -> str:
        return self.path.name

    def code_cells(self) -> list[CodeCell]:
        return [c for c in self.cells if isinstance(c, CodeCell)]

    def markdown_cells(self) -> list[MarkdownCell]:
        return [c for c in self.cells if isinstance(c, MarkdownCell)]

    @staticmethod
    def from_path(path: Path) -> Notebook:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(ErrorCode.invalid_json, path, "notebook is not UTF-8 text") from exc
        except OSError as exc:
            raise ParseError(ErrorCode.unreadable, path, f"cannot read notebook: {exc}") from exc
        return Notebook.from_json(text, path)

    @staticmethod
    def from_json(s: str, path: Path) -> Notebook:
        try:
            obj: object = json.loads(s)
        except (ValueError, RecursionError) as exc:
            # also covers oversized integer literals and runaway nesting
            raise ParseError(ErrorCode.invalid_json, path, f"invalid JSON: {exc}") from exc
        if not isinstance(obj, dict):
            raise ParseError(ErrorCode.invalid_field, path, "notebook must be a JSON object")
        data: dict[str, object] = {str(k): v for k, v in obj.items()}
        return Notebook.from_dict(data, path)

    @staticmethod
    def from_dict(d: dict[str, object], path: Path) -> Notebook:
        major = _int_field(d, "nbformat", _CURRENT_MAJOR, path)
        if major < _LEGACY_MAJOR:
            raise ParseError(
                ErrorCode.unsupported_format,
                path,
                f"nbformat {major} notebooks are not supported",
            )
        if major == _LEGACY_MAJOR:
            d = _upgrade_legacy(d, path)
        if "cells" not in d:
            raise ParseError(ErrorCode.missing_field, path, "notebook has no 'cells' list")
        raw_cells = d["cells"]
        if not isinstance(raw_cells, list):
            raise ParseError(ErrorCode.invalid_field, path, "'cells' must be a list")
        cells = tuple(_parse_cell(i, raw, path) for i, raw in enumerate(raw_cells))
        return Notebook(path=path, cells=cells)


def _upgrade_legacy(d: dict[str, object], path: Path) -> dict[str, object]:
    # nbformat 3 keeps cells under worksheets with input/prompt_number keys
    if not isinstance(d.get("worksheets"), list):
        raise ParseError(
            ErrorCode.missing_field, path, "nbformat 3 notebook has no 'worksheets' list"
        )
    try:
        node = nbformat.convert(nbformat.from_dict(d), _CURRENT_MAJOR)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise ParseError(
            ErrorCode.invalid_field, path, f"cannot upgrade nbformat 3 notebook: {exc}"
        ) from exc
    return {str(k): v for k, v in node.items()}


def _int_field(d: dict[str, object], key: str, default: int, path: Path) -> int:
    val = d.get(key, default)
    if isinstance(val, bool) or not isinstance(val, int):
        raise ParseError(ErrorCode.invalid_field, path, f"'{key}' must be an integer")
    return val


def _parse_cell(idx: int, raw: object, path: Path) -> Cell:
    if not isinstance(raw, dict):
        raise ParseError(ErrorCode.invalid_field, path, f"cell {idx} is not an object")
    if "cell_type" not in raw:
        raise ParseError(ErrorCode.missing_field, path, f"cell {idx} has no 'cell_type'")
    cell_type = raw["cell_type"]
    if not isinstance(cell_type, str):
        raise ParseError(ErrorCode.invalid_field, path, f"cell {idx} 'cell_type' must be a string")
    source = _source_text(raw.get("source", ""), idx, path)
    if cell_type == "code":
        count = _execution_count(raw.get("execution_count"), idx, path)
        return CodeCell(index=idx, source=source, execution_count=count)
    if cell_type == "markdown":
        return MarkdownCell(index=idx, source=source)
    return OtherCell(index=idx, cell_type=cell_type, source=source)


def _source_text(val: object, idx: int, path: Path) -> str:
    if isinstance(val, str):
        return val
    if isinstance(val, list) and all(isinstance(line, str) for line in val):
        return "".join(str(line) for line in val)
    raise ParseError(
        ErrorCode.invalid_field, path, f"cell {idx} 'source' must be a string or list of strings"
    )


def _execution_count(val: object, idx: int, path: Path) -> int | None:
    if val is None:
        return None
    if isinstance(val, bool) or not isinstance(val, int) or val < 1:
        raise ParseError(
            ErrorCode.invalid_field,
            path,
            f"cell {idx} has invalid execution_count {val!r}",
        )
    return val
