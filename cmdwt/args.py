#===============================================================================
#  cmdwt | args.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Reads the raw command line and strips the launcher's own path from its head.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Optional


def trim_start(s: Optional[str], prefix: str) -> Optional[str]:
    """Remove *prefix* from the start of *s* at most once (case-insensitive).

    Unlike ``str.lstrip`` this never removes a repeated prefix twice.
    ``None`` passes through as ``None``.
    """
    if s is None:
        return None
    if s[:len(prefix)].casefold() == prefix.casefold():
        return s[len(prefix):]
    return s


def program_path() -> str:
    """Absolute path of the running program (base directory + file name)."""
    if getattr(sys, "frozen", False):
        return str(Path(sys.executable).absolute())
    return str(Path(sys.argv[0]).absolute())


def self_reference() -> str:
    # Explorer and cmd.exe write the program path quoted at the head of the line.
    return f'"{program_path()}"'


def read_command_line() -> str:
    """Return the raw command line of this process.

    A frozen Windows build reads the line straight from the OS, so the
    forwarded text keeps the caller's own quoting. Under an interpreter the
    OS line starts with python.exe, so it is rebuilt from argv instead.
    """
    if os.name == "nt" and getattr(sys, "frozen", False):
        import win32api
        return win32api.GetCommandLine()
    return f"{self_reference()} {subprocess.list2cmdline(sys.argv[1:])}"


def extract_arguments(command_line: Optional[str] = None, prefix: Optional[str] = None) -> str:
    """Return the text to forward: the command line minus the self reference.

    Only the whitespace separating the self reference from the first
    argument is dropped; everything after it is passed through verbatim.
    """
    if command_line is None:
        command_line = read_command_line()
    if prefix is None:
        prefix = self_reference()
    rest = trim_start(command_line, prefix)
    if len(rest) < len(command_line):
        rest = rest.lstrip(" \t")
    return rest
