from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .logging import get_logger


def get_version() -> str:
    try:
        return version("nbsanity")
    except PackageNotFoundError as exc:
        get_logger().warning("pkg_version_fallback error=%s", exc)
        # Normalize to a generic runtime error for callers
        raise RuntimeError("package version not found") from exc
