from __future__ import annotations

from typing import Sequence

from .toolchain import INSTALLATION_INSTRUCTIONS


class PlannerError(RuntimeError):
    """Base class for failures that abort planning."""


class PackageUnavailableError(PlannerError):
    """Raised when a requested name matches no known package."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'No available formula with the name "{name}".')


class BuildFlagsError(PlannerError):
    """Raised when build flags are requested but no build tools are installed."""

    def __init__(self, flags: Sequence[str], bottled: bool = True) -> None:
        self.flags = list(flags)
        self.bottled = bottled
        if len(self.flags) > 1:
            flag_text, require_text = "flags", "require"
        else:
            flag_text, require_text = "flag", "requires"
        lines = [
            f"The following {flag_text}:",
            f"  {', '.join(self.flags)}",
            f"{require_text} building tools, but none are installed.",
            INSTALLATION_INSTRUCTIONS,
        ]
        if bottled:
            lines.append(f"Alternatively, remove the {flag_text} to attempt bottle installation.")
        super().__init__("\n".join(lines))


class BottleFetchError(PlannerError):
    """Raised when bottle metadata for a package cannot be retrieved."""

    def __init__(self, package: str, reason: object) -> None:
        self.package = package
        self.reason = reason
        super().__init__(f"{package}: failed to fetch bottle metadata: {reason}")


class CatalogError(PlannerError):
    """Raised for unreadable or inconsistent package catalogs."""


__all__ = [
    "BottleFetchError",
    "BuildFlagsError",
    "CatalogError",
    "PackageUnavailableError",
    "PlannerError",
]
