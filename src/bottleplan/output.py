"""Terminal message helpers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO


def ohai(title: str, items: Iterable[str] = (), *, out: Optional[TextIO] = None) -> None:
    stream = out or sys.stdout
    stream.write(f"==> {title}\n")
    for item in items:
        stream.write(f"{item}\n")
    stream.flush()


def opoo(message: object, *, out: Optional[TextIO] = None) -> None:
    stream = out or sys.stderr
    stream.write(f"Warning: {message}\n")
    stream.flush()


def ofail(message: object, *, out: Optional[TextIO] = None) -> None:
    stream = out or sys.stderr
    stream.write(f"Error: {message}\n")
    stream.flush()


def pluralize(word: str, count: int, *, plural: Optional[str] = None) -> str:
    if count == 1:
        return f"{count} {word}"
    return f"{count} {plural or word + 's'}"


__all__ = ["ofail", "ohai", "opoo", "pluralize"]
