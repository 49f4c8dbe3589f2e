#===============================================================================
#  cmdwt | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Locates the target executable: a fixed path, or a scan of every drive's WindowsApps folder.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import psutil

from .constants import WINDOWS_APPS_SUBDIR
from .models import FOUND, INACCESSIBLE, MISSING, DriveProbe, LaunchSettings, SearchReport

log = logging.getLogger(__name__)


def static_target(settings: LaunchSettings) -> str:
    """The configured target path. Not validated; a bad path fails at launch."""
    return settings.target_path


def list_drives() -> List[str]:
    """Mount points of every drive, in the order the OS reports them."""
    try:
        partitions = psutil.disk_partitions(all=True)
    except (OSError, RuntimeError) as e:
        log.debug("Drive enumeration failed: %s", e)
        return []
    return [p.mountpoint for p in partitions if p.mountpoint]


def find_file(directory: Path, file_name: str) -> Optional[Path]:
    """Return *directory*/*file_name* if it is a file. No recursion."""
    candidate = directory / file_name
    try:
        if candidate.is_file():
            return candidate
    except OSError as e:
        log.debug("Skipping %s: %s", directory, e)
    return None


def probe_drive(drive: str, file_name: str, subdir: Sequence[str] = WINDOWS_APPS_SUBDIR) -> DriveProbe:
    """Look for *file_name* in each package folder under <drive>/Program Files/WindowsApps.

    Only the immediate children of the WindowsApps folder are checked and
    the first hit wins. Access errors never escape: they come back as an
    INACCESSIBLE probe.
    """
    apps_dir = Path(drive, *subdir)
    try:
        if not apps_dir.is_dir():
            return DriveProbe(drive=drive, status=MISSING)
        entries = list(apps_dir.iterdir())
    except OSError as e:
        log.debug("Drive %s skipped: %s", drive, e)
        return DriveProbe(drive=drive, status=INACCESSIBLE, reason=str(e))

    for package_dir in entries:
        try:
            if not package_dir.is_dir():
                continue
        except OSError as e:
            log.debug("Skipping %s: %s", package_dir, e)
            continue
        hit = find_file(package_dir, file_name)
        if hit is not None:
            return DriveProbe(drive=drive, status=FOUND, path=hit)
    return DriveProbe(drive=drive, status=MISSING)


def find_win_app(
    file_name: str,
    drives: Optional[Iterable[str]] = None,
    subdir: Sequence[str] = WINDOWS_APPS_SUBDIR,
) -> SearchReport:
    """Search every drive for *file_name*; stop at the first drive that has it."""
    probes: List[DriveProbe] = []
    for drive in (list_drives() if drives is None else drives):
        probe = probe_drive(drive, file_name, subdir)
        probes.append(probe)
        if probe.found:
            log.info("Found %s on %s: %s", file_name, drive, probe.path)
            return SearchReport(file_name=file_name, probes=tuple(probes), found=probe.path)

    log.info("%s not found on %d drive(s)", file_name, len(probes))
    return SearchReport(file_name=file_name, probes=tuple(probes), found=None)
