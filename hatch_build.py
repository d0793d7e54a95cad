"""Hatchling build hook that records the git commit in the package."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO_PATH = "levorg/_build_info.py"


class CustomBuildHook(BuildHookInterface):
    """Write levorg/_build_info.py so installed copies can report their commit."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        commit = self._current_commit(Path(self.root))
        target = Path(self.root) / BUILD_INFO_PATH
        target.write_text(
            "# Auto-generated at build time.\n" f"COMMIT = {commit!r}\n",
            encoding="utf-8",
        )
        build_data.setdefault("artifacts", []).append(BUILD_INFO_PATH)

    @staticmethod
    def _current_commit(root: Path) -> str | None:
        try:
            out = subprocess.check_output(["git", "rev-parse", "HEAD"], cwd=str(root),
                                          stderr=subprocess.DEVNULL)
        except (subprocess.CalledProcessError, FileNotFoundError, OSError):
            # A source tree without git still builds
            return None
        return out.decode().strip() or None
