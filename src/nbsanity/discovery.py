from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Final

NOTEBOOK_SUFFIX: Final[str] = ".ipynb"
IGNORED_PARTS: Final[frozenset[str]] = frozenset(
    {
        ".ipynb_checkpoints",
        ".git",
        ".venv",
        "node_modules",
        "__pycache__",
    }
)


def find_notebooks(paths: Iterable[Path]) -> list[Path]:
    """Expand files and directories into notebook paths.

    Directories are searched recursively, explicit notebook files are kept
    as given, and anything else is ignored. Output order follows the inputs
    with each directory's matches sorted; duplicates are dropped.
    """
    out: list[Path] = []
    seen: set[Path] = set()
    for root in paths:
        for p in _expand(root):
            key = p.resolve()
            if key in seen:
                continue
            seen.add(key)
            out.append(p)
    return out


def _expand(root: Path) -> list[Path]:
    if root.is_dir():
        found = [
            p for p in root.rglob(f"*{NOTEBOOK_SUFFIX}") if p.is_file() and not _ignored(p, root)
        ]
        return sorted(found)
    if root.is_file() and root.suffix == NOTEBOOK_SUFFIX:
        return [root]
    return []


def _ignored(path: Path, root: Path) -> bool:
    return any(part in IGNORED_PARTS for part in path.relative_to(root).parts)
