"""Detection of the tools needed to build packages from source."""

from __future__ import annotations

import shutil
from typing import Callable, Optional

COMPILERS = ("cc", "gcc", "clang")
BUILD_TOOLS = ("make",)

INSTALLATION_INSTRUCTIONS = (
    "Install GCC or Clang together with make using your system package manager."
)


def build_toolchain_installed(which: Callable[[str], Optional[str]] = shutil.which) -> bool:
    """Return ``True`` when a C compiler and ``make`` are on ``PATH``."""

    if not any(which(name) for name in COMPILERS):
        return False
    return all(which(name) for name in BUILD_TOOLS)


__all__ = ["BUILD_TOOLS", "COMPILERS", "INSTALLATION_INSTRUCTIONS", "build_toolchain_installed"]
