#===============================================================================
#  cmdwt | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for default target paths, folder conventions, env names and exit codes.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

# --- Target defaults ---
DEFAULT_TARGET_PATH = "E:\\Programs\\Windows Terminal\\wt.exe"
DEFAULT_TARGET_NAME = "wt.exe"

# Packaged apps live under <drive>\Program Files\WindowsApps\<package>\
WINDOWS_APPS_SUBDIR = ("Program Files", "WindowsApps")

EXPLORER_EXE = "explorer.exe"
FALLBACK_WINDOWS_DIR = "C:\\Windows"

# --- Environment configuration ---
ENV_MUST_SEARCH = "CMDWT_MUST_SEARCH"
ENV_TARGET_PATH = "CMDWT_TARGET_PATH"
ENV_TARGET_NAME = "CMDWT_TARGET_NAME"
ENV_EXPLORER = "CMDWT_EXPLORER"
ENV_PAUSE = "CMDWT_PAUSE"
ENV_LOG_LEVEL = "CMDWT_LOG_LEVEL"
ENV_LOG_FILE = "CMDWT_LOG_FILE"

TRUTHY = {"1", "true", "yes", "on"}

# --- Exit codes ---
EXIT_OK = 0
EXIT_NOT_FOUND = 2
EXIT_LAUNCH_FAILED = 3
