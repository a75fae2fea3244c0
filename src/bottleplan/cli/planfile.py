"""Hand-off of validated install plans to the installer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional, TextIO

from ..fs import write_json
from ..models import InstallPlan
from ..output import ohai, pluralize


class PlanExporter:
    """Default installer: publish the plan for the component that installs it.

    With ``dry_run`` the packages are only listed.  Otherwise the plan is
    written as JSON to *path*, or to *out* when no path is given.
    """

    def __init__(self, out: TextIO, path: Optional[Path] = None) -> None:
        self._out = out
        self.path = path

    def install(self, plan: InstallPlan) -> int:
        if plan.options.dry_run:
            count = len(plan.packages)
            ohai(
                f"Would install {pluralize('formula', count, plural='formulae')}:",
                [" ".join(pkg.name for pkg in plan.packages)],
                out=self._out,
            )
            return 0

        if self.path is not None:
            write_json(self.path, plan.to_dict())
            ohai(f"Install plan written to {self.path}", out=self._out)
            return 0

        json.dump(plan.to_dict(), self._out, indent=2, sort_keys=True)
        self._out.write("\n")
        self._out.flush()
        return 0


__all__ = ["PlanExporter"]
