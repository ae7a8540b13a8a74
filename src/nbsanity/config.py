from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Final

from .errors import ConfigError

_DEFAULT_CONFIG_PATH: Final[Path] = Path("pyproject.toml")
_TOOL_KEY: Final[str] = "nbsanity"


@dataclass(frozen=True)
class Settings:
    root: Path = Path(".")
    # Rule names to skip; names matching no rule have no effect
    disable: frozenset[str] = frozenset()
    jobs: int = 1

    @staticmethod
    def _toml_path() -> Path:
        env_val = os.getenv("NBSANITY_CONFIG")
        if env_val:
            return Path(env_val)
        return _DEFAULT_CONFIG_PATH

    @classmethod
    def load(cls, path: Path | None = None) -> Settings:
        # Load env first, then override from the [tool.nbsanity] table if present.
        base = _load_from_env(cls())
        cfg_path = path if path is not None else cls._toml_path()
        if not cfg_path.exists():
            return base
        try:
            raw: object = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise ConfigError(f"Failed to read config TOML: {cfg_path}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML config: {cfg_path}: {exc}") from exc
        return _merge(base, _tool_table(raw))


def _load_from_env(s: Settings) -> Settings:
    root = os.getenv("NBSANITY__ROOT")
    disable = os.getenv("NBSANITY__DISABLE")
    jobs = os.getenv("NBSANITY__JOBS")
    if root:
        s = replace(s, root=Path(root))
    if disable is not None:
        names = frozenset(n.strip() for n in disable.split(",") if n.strip())
        s = replace(s, disable=names)
    if jobs is not None and jobs.isdigit():
        s = replace(s, jobs=_positive_jobs(int(jobs)))
    return s


def _merge(base: Settings, data: dict[str, object]) -> Settings:
    out = base
    if "root" in data:
        root = data["root"]
        if not isinstance(root, str):
            raise ConfigError("tool.nbsanity.root must be a string path")
        out = replace(out, root=Path(root))
    if "disable" in data:
        out = replace(out, disable=_coerce_disable(data["disable"]))
    if "jobs" in data:
        val = data["jobs"]
        if isinstance(val, bool) or not isinstance(val, int):
            raise ConfigError("tool.nbsanity.jobs must be an integer")
        out = replace(out, jobs=_positive_jobs(val))
    return out


def _coerce_disable(val: object) -> frozenset[str]:
    if not isinstance(val, list):
        raise ConfigError("tool.nbsanity.disable must be a list of rule names")
    names: set[str] = set()
    for item in val:
        if not isinstance(item, str):
            raise ConfigError(f"tool.nbsanity.disable entries must be strings, got {item!r}")
        names.add(item)
    return frozenset(names)


def _positive_jobs(n: int) -> int:
    if n < 1:
        raise ConfigError("jobs must be >= 1")
    return n


def _tool_table(raw: object) -> dict[str, object]:
    if isinstance(raw, dict):
        tool: object = raw.get("tool", {})
        if isinstance(tool, dict):
            tab: object = tool.get(_TOOL_KEY, {})
            if isinstance(tab, dict):
                return {str(k): v for k, v in tab.items()}
    return {}
