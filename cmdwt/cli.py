#===============================================================================
#  cmdwt | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Entry point: extract arguments, locate the target, delegate the launch to explorer.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Mapping, Optional

from .args import extract_arguments
from .constants import EXIT_LAUNCH_FAILED, EXIT_NOT_FOUND, EXIT_OK
from .errors import LaunchError
from .fs_discovery import find_win_app, static_target
from .launcher import execute
from .log_setup import setup_logging
from .settings import load_settings
from .shell_resolver import explorer_path

log = logging.getLogger(__name__)


def main(command_line: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> int:
    """Run one delegated launch and return the process exit code."""
    settings = load_settings(env)
    setup_logging(settings)

    forwarded = extract_arguments(command_line)
    log.debug("Forwarding: %r", forwarded)

    if settings.must_search:
        report = find_win_app(settings.target_name)
        if report.skipped:
            log.debug("%d drive(s) could not be checked", len(report.skipped))
        if report.found is None:
            print(f"{settings.target_name} could not be found.")
            return EXIT_NOT_FOUND
        target = str(report.found)
    else:
        target = static_target(settings)

    try:
        execute(target, forwarded, settings, explorer=explorer_path(settings, env))
    except LaunchError as e:
        log.error("%s", e)
        return EXIT_LAUNCH_FAILED

    if settings.pause:
        try:
            input("Press Enter to close...")
        except EOFError:
            log.debug("No console to wait on")
    return EXIT_OK
