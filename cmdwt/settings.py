#===============================================================================
#  cmdwt | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load launcher settings from environment variables (override first, then defaults).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
from typing import Dict, Mapping, Optional

from .constants import (
    DEFAULT_TARGET_NAME,
    DEFAULT_TARGET_PATH,
    ENV_EXPLORER,
    ENV_LOG_FILE,
    ENV_LOG_LEVEL,
    ENV_MUST_SEARCH,
    ENV_PAUSE,
    ENV_TARGET_NAME,
    ENV_TARGET_PATH,
    TRUTHY,
)
from .models import LaunchSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_settings() -> Dict[str, object]:
    return {
        "must_search": False,
        "target_path": DEFAULT_TARGET_PATH,
        "target_name": DEFAULT_TARGET_NAME,
        "explorer_override": "",
        "pause": False,
        "log_level": "WARNING",
        "log_file": "",
    }


def parse_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in TRUTHY


def _text(env: Mapping[str, str], name: str, default: str) -> str:
    value = (env.get(name) or "").strip()
    return value or default


def load_settings(env: Optional[Mapping[str, str]] = None) -> LaunchSettings:
    """Read settings from *env* (defaults to os.environ).

    Unset or blank variables keep their defaults; unknown log levels fall
    back to WARNING.
    """
    env = os.environ if env is None else env
    d = default_settings()

    level = _text(env, ENV_LOG_LEVEL, str(d["log_level"])).upper()
    if level not in LOG_LEVELS:
        logging.getLogger(__name__).warning("Unknown %s=%r, using WARNING", ENV_LOG_LEVEL, level)
        level = "WARNING"

    return LaunchSettings(
        must_search=parse_flag(env.get(ENV_MUST_SEARCH)),
        target_path=_text(env, ENV_TARGET_PATH, str(d["target_path"])),
        target_name=_text(env, ENV_TARGET_NAME, str(d["target_name"])),
        explorer_override=_text(env, ENV_EXPLORER, ""),
        pause=parse_flag(env.get(ENV_PAUSE)),
        log_level=level,
        log_file=_text(env, ENV_LOG_FILE, ""),
    )
