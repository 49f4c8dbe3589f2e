#===============================================================================
#  cmdwt | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Exceptions raised by the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class LaunchError(RuntimeError):
    """Process creation for the delegated launch failed at the OS level."""

    def __init__(self, command_line: str, cause: Exception):
        super().__init__(f"Could not start: {command_line} ({cause})")
        self.command_line = command_line
        self.cause = cause
