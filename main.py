#===============================================================================
#  cmdwt  |  Delegated Windows Terminal Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  A command-line shim that re-launches Windows Terminal (wt.exe) through
#  explorer.exe, forwarding every argument it was given. Packaged apps under
#  WindowsApps can refuse a direct launch from another process; explorer is
#  allowed to start them.
#
#  Configuration (environment)
#  ---------------------------
#    CMDWT_MUST_SEARCH=1     -> scan every drive's Program Files\WindowsApps
#    CMDWT_TARGET_PATH       -> fixed target when not searching
#    CMDWT_TARGET_NAME       -> file name to search for (default wt.exe)
#    CMDWT_EXPLORER          -> replacement for %SystemRoot%\explorer.exe
#    CMDWT_PAUSE=1           -> wait for Enter after launching
#    CMDWT_LOG_LEVEL / CMDWT_LOG_FILE
#
#  Exit codes: 0 launched, 2 target not found, 3 launch failed.
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (psutil, pywin32) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

import sys

from cmdwt.cli import main


if __name__ == "__main__":
    sys.exit(main())
