"""Interactive confirmation before installing.

The prompt loops until it reads one of the recognised answers.  Without a
configured attempt limit it waits indefinitely; with one it declines after
that many unrecognised answers.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional, TextIO

from .interfaces import LineSource
from .models import Package, SizeSummary
from .output import ohai
from .sizing import disk_usage_readable

logger = logging.getLogger(__name__)

ACCEPTED_INPUTS = frozenset({"y", "yes"})
DECLINED_INPUTS = frozenset({"n", "no"})

PROMPT = "Do you want to proceed with the installation? [Y/y/yes/N/n]"
INVALID_INPUT = "Invalid input. Please enter 'Y', 'y', or 'yes' to proceed, or 'N' to abort."


def parse_answer(raw: str) -> Optional[bool]:
    answer = raw.strip().lower()
    if answer in ACCEPTED_INPUTS:
        return True
    if answer in DECLINED_INPUTS:
        return False
    return None


def render_summary(summary: SizeSummary, packages: Iterable[Package], out: TextIO) -> None:
    out.write(f"Formulae: {', '.join(pkg.name for pkg in packages)}\n\n")
    out.write(f"Download Size: {disk_usage_readable(summary.download)}\n")
    out.write(f"Install Size:  {disk_usage_readable(summary.installed)}\n")
    if summary.net != 0:
        out.write(f"Net Install Size: {disk_usage_readable(summary.net)}\n")


def ask(reader: LineSource, out: TextIO, *, max_attempts: Optional[int] = None) -> bool:
    ohai(PROMPT, out=out)
    attempts = 0
    while True:
        raw = reader.readline()
        if raw == "":
            logger.info("end of input while waiting for confirmation; not installing")
            return False
        answer = parse_answer(raw)
        if answer is True:
            out.write("Proceeding with installation...\n")
            return True
        if answer is False:
            return False

        attempts += 1
        if max_attempts is not None and attempts >= max_attempts:
            logger.warning("no valid answer after %d attempts; not installing", attempts)
            return False
        out.write(INVALID_INPUT + "\n")
        out.flush()


def confirm(
    summary: SizeSummary,
    packages: Iterable[Package],
    reader: Optional[LineSource] = None,
    out: Optional[TextIO] = None,
    *,
    max_attempts: Optional[int] = None,
) -> bool:
    """Show the estimate and block until the user accepts or declines."""

    reader = reader if reader is not None else sys.stdin
    out = out if out is not None else sys.stdout
    render_summary(summary, packages, out)
    return ask(reader, out, max_attempts=max_attempts)


__all__ = [
    "ACCEPTED_INPUTS",
    "DECLINED_INPUTS",
    "INVALID_INPUT",
    "PROMPT",
    "ask",
    "confirm",
    "parse_answer",
    "render_summary",
]
