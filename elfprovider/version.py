"""Build and runtime version information."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass

# Filled in by the release process.
GIT_MAJOR = ""
GIT_MINOR = ""
GIT_VERSION = ""
GIT_COMMIT = ""
GIT_TREE_STATE = ""
BUILD_DATE = ""

_JSON_KEYS = {
    "major": "major",
    "minor": "minor",
    "git_version": "gitVersion",
    "git_commit": "gitCommit",
    "git_tree_state": "gitTreeState",
    "build_date": "buildDate",
    "python_version": "pythonVersion",
    "compiler": "compiler",
    "platform": "platform",
}


@dataclass(frozen=True)
class Info:
    """Version details of the running build."""

    major: str = ""
    minor: str = ""
    git_version: str = ""
    git_commit: str = ""
    git_tree_state: str = ""
    build_date: str = ""
    python_version: str = ""
    compiler: str = ""
    platform: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the non-empty fields under their camelCase names."""
        return {
            key: getattr(self, attr)
            for attr, key in _JSON_KEYS.items()
            if getattr(self, attr)
        }

    def __str__(self) -> str:
        return self.git_version


def get() -> Info:
    """Return the version information of this build and interpreter."""
    return Info(
        major=GIT_MAJOR,
        minor=GIT_MINOR,
        git_version=GIT_VERSION,
        git_commit=GIT_COMMIT,
        git_tree_state=GIT_TREE_STATE,
        build_date=BUILD_DATE,
        python_version=platform.python_version(),
        compiler=platform.python_implementation(),
        platform=f"{sys.platform}/{platform.machine().lower()}",
    )