"""Command line entry points for :mod:`bottleplan`.

Each command lives in its own module under :mod:`bottleplan.cli.commands`.
The :func:`main` function defined here backs the ``bottleplan`` console
script.
"""

from __future__ import annotations

from .main import main

__all__ = ["main"]
