#===============================================================================
#  cmdwt | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Builds the explorer command line for the target and starts it detached.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import subprocess
from typing import Optional

from .errors import LaunchError
from .models import LaunchPlan, LaunchSettings
from .shell_resolver import explorer_path

log = logging.getLogger(__name__)


def smart_quote(path: str) -> str:
    """Wrap *path* in double quotes if it contains a space, else return it as-is."""
    return f'"{path}"' if " " in path else path


def build_arguments(target: str, forwarded: str) -> str:
    # Forwarded text is appended verbatim; no escaping is applied.
    return f"{smart_quote(target)} {forwarded}"


def build_plan(target: str, forwarded: str, explorer: str) -> LaunchPlan:
    arguments = build_arguments(target, forwarded)
    return LaunchPlan(
        explorer=explorer,
        arguments=arguments,
        command_line=f"{smart_quote(explorer)} {arguments}",
        target=target,
        forwarded=forwarded,
    )


def spawn_detached(plan: LaunchPlan) -> subprocess.Popen:
    """Start the plan's command and return immediately.

    The child does not inherit our standard streams and is never waited on.
    Windows gets the command string untouched (explorer parses its own
    command line). Other platforms get an argv built from the plan's parts;
    forwarded text is split on whitespace only, never re-parsed for quotes
    or escapes.
    """
    kwargs = dict(
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        close_fds=True,
    )
    if os.name == "nt":
        kwargs["creationflags"] = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        return subprocess.Popen(plan.command_line, **kwargs)

    kwargs["start_new_session"] = True
    return subprocess.Popen([plan.explorer, plan.target, *plan.forwarded.split()], **kwargs)


def execute(target: str, forwarded: str, settings: LaunchSettings, explorer: Optional[str] = None) -> LaunchPlan:
    """Ask the file-manager process to launch *target* with *forwarded* arguments.

    Prints the command line before starting it. Raises LaunchError if the
    process cannot be created.
    """
    plan = build_plan(target, forwarded, explorer or explorer_path(settings))
    print(f"Running: {plan.command_line}", flush=True)
    try:
        proc = spawn_detached(plan)
    except (OSError, ValueError) as e:
        raise LaunchError(plan.command_line, e) from e
    log.debug("Started pid %s", getattr(proc, "pid", "?"))
    return plan
