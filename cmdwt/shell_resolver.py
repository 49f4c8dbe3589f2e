#===============================================================================
#  cmdwt | shell_resolver.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Resolves the file-manager executable the launch is delegated to.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import ntpath
import os
from typing import Mapping, Optional

from .constants import EXPLORER_EXE, FALLBACK_WINDOWS_DIR
from .models import LaunchSettings


def explorer_path(settings: LaunchSettings, env: Optional[Mapping[str, str]] = None) -> str:
    """Return the path of explorer.exe (or the configured replacement).

    Resolution order:
      1) settings.explorer_override (CMDWT_EXPLORER) if set
      2) %SystemRoot%\\explorer.exe
      3) %WINDIR%\\explorer.exe
      4) C:\\Windows\\explorer.exe

    The file is not checked for existence; a bad path fails at launch.
    """
    if settings.explorer_override:
        return settings.explorer_override

    env = os.environ if env is None else env
    windows_dir = env.get("SystemRoot") or env.get("WINDIR") or FALLBACK_WINDOWS_DIR
    return ntpath.join(windows_dir, EXPLORER_EXE)
