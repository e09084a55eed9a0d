"""Build and version information."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass

VERSION = "dev"
GIT_COMMIT = "unknown"
BUILD_DATE = "unknown"
RUNTIME_VERSION = f"python{platform.python_version()}"


@dataclass(frozen=True)
class Info:
    """Version details of the running program."""

    version: str
    git_commit: str
    build_date: str
    runtime_version: str
    platform: str

    def __str__(self) -> str:
        return self.string_with_program_name("zenta")

    def string_with_program_name(self, program_name: str) -> str:
        """Describe the version, naming the program as given."""
        return (
            f"{program_name} {self.version} ({self.git_commit}) "
            f"built with {self.runtime_version} on {self.build_date} "
            f"for {self.platform}"
        )


def get() -> Info:
    """Return the version information of this build."""
    machine = platform.machine().lower() or "unknown"
    return Info(
        version=VERSION,
        git_commit=GIT_COMMIT,
        build_date=BUILD_DATE,
        runtime_version=RUNTIME_VERSION,
        platform=f"{sys.platform}/{machine}",
    )