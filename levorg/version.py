from __future__ import annotations

import importlib.metadata
import subprocess
from pathlib import Path
from typing import NamedTuple, Optional

from .constants import EditorConstants


class BuildInfo(NamedTuple):
    version: str
    commit: Optional[str]
    dirty: bool


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
        return out.decode().strip() or None
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None


def _package_version() -> str:
    try:
        return importlib.metadata.version(EditorConstants.APP_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "0+unknown"


def _commit_from_checkout() -> tuple[Optional[str], bool]:
    here = Path(__file__).resolve().parent
    commit = _run_git(["rev-parse", "HEAD"], cwd=here)
    if commit is None:
        return None, False
    status = _run_git(["status", "--porcelain"], cwd=here)
    return commit, bool(status)


def _commit_from_build() -> Optional[str]:
    # Generated at build time by the hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    return getattr(_build_info, "COMMIT", None)


def get_build_info() -> BuildInfo:
    commit, dirty = _commit_from_checkout()
    if commit is None:
        commit = _commit_from_build()
    return BuildInfo(version=_package_version(), commit=commit, dirty=dirty)


def get_version_string() -> str:
    info = get_build_info()
    if info.commit is None:
        return f"{EditorConstants.APP_NAME} {info.version}"
    dirty_suffix = "-dirty" if info.dirty else ""
    return f"{EditorConstants.APP_NAME} {info.version} ({info.commit[:7]}{dirty_suffix})"
