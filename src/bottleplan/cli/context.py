"""Runtime context shared across CLI commands."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Sequence, TextIO

from ..config import PlannerConfig


@dataclass(slots=True)
class CLIContext:
    """Snapshot of the CLI invocation details."""

    prog: str
    raw_args: Sequence[str]
    config: PlannerConfig = field(default_factory=PlannerConfig)
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)


__all__ = ["CLIContext"]
