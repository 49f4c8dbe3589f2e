#===============================================================================
#  cmdwt | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models: launch settings, per-drive search results and launch plans.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

# DriveProbe.status values
FOUND = "found"
MISSING = "missing"
INACCESSIBLE = "inaccessible"


@dataclass(frozen=True)
class LaunchSettings:
    """Runtime configuration, read once from the environment."""
    must_search: bool = False
    target_path: str = ""
    target_name: str = ""
    explorer_override: str = ""      # empty -> resolve from %SystemRoot%
    pause: bool = False
    log_level: str = "WARNING"
    log_file: str = ""               # empty -> console only


@dataclass(frozen=True)
class DriveProbe:
    """Outcome of looking at one drive's WindowsApps folder."""
    drive: str
    status: str                      # FOUND | MISSING | INACCESSIBLE
    path: Optional[Path] = None      # set only when status == FOUND
    reason: str = ""

    @property
    def found(self) -> bool:
        return self.status == FOUND


@dataclass(frozen=True)
class SearchReport:
    file_name: str
    probes: Tuple[DriveProbe, ...] = field(default_factory=tuple)
    found: Optional[Path] = None

    @property
    def skipped(self) -> Tuple[DriveProbe, ...]:
        return tuple(p for p in self.probes if p.status == INACCESSIBLE)


@dataclass(frozen=True)
class LaunchPlan:
    explorer: str        # file-manager executable
    arguments: str       # "<smart-quoted target> <forwarded args>"
    command_line: str    # "<smart-quoted explorer> <arguments>"
    target: str = ""     # unquoted target path
    forwarded: str = ""  # forwarded text, verbatim
