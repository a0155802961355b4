#===============================================================================
#  Folder_Launcher | resolver.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Turns a requested launcher into the program name to run.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import shutil
from typing import List, Optional

from .models import DEFAULT_LAUNCHERS, LauncherEntry, LauncherTable


def resolve(launcher_id: Optional[str], table: LauncherTable = DEFAULT_LAUNCHERS) -> str:
    """Return the executable name for a launcher request.

    Resolution order:
      1) launcher_id as given, when non-empty (table membership is not checked;
         any program name is accepted)
      2) the table's default entry (auto-detect)

    Never fails. A missing program only shows up when spawning.
    """
    if launcher_id:
        return launcher_id
    return table.default.identifier


def available_launchers(table: LauncherTable = DEFAULT_LAUNCHERS) -> List[LauncherEntry]:
    """Entries whose program is found on PATH, in table order."""
    return [e for e in table if shutil.which(e.identifier)]
