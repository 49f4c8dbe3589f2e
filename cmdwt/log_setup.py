#===============================================================================
#  cmdwt | log_setup.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Console and optional rotating-file logging for the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .models import LaunchSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def setup_logging(settings: LaunchSettings) -> logging.Logger:
    """Configure the package logger.

    Console output goes to stderr so stdout stays reserved for the
    ``Running:`` line. A log file, when configured, always records DEBUG.
    """
    logger = logging.getLogger("cmdwt")
    logger.handlers.clear()
    logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(getattr(logging, settings.log_level, logging.WARNING))
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)
    level = console.level

    if settings.log_file:
        log_path = Path(settings.log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
            )
        except OSError as e:
            logger.warning("Cannot open log file %s: %s", log_path, e)
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)
            level = logging.DEBUG

    logger.setLevel(level)
    return logger
