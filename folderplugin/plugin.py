#===============================================================================
#  Folder_Launcher | plugin.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  The FOLDER connection plugin: reads the profile through the host, opens the
#  folder with the chosen launcher and reports back.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional

from .constants import (
    NO_TARGET_MESSAGE,
    PLUGIN_DESCRIPTION,
    PLUGIN_NAME,
    SETTING_LAUNCHER,
    SETTING_SERVER,
)
from .host import HostServices
from .models import (
    DEFAULT_LAUNCHERS,
    ConnectionRequest,
    ConnectionState,
    LauncherTable,
    SpawnFailure,
    SpawnResult,
    SpawnSuccess,
)
from .resolver import resolve
from .spawner import spawn


class FolderPlugin:
    """One connection of the FOLDER protocol.

    Lifecycle:
      IDLE -> OPENING -> OPENED | FAILED
      any  -> CLOSED (close never fails and leaves the launched program alone)
    """

    def __init__(self, host: HostServices, table: LauncherTable = DEFAULT_LAUNCHERS):
        self.host = host
        self.table = table
        self.state = ConnectionState.IDLE
        self.last_result: Optional[SpawnResult] = None

    def _log(self, message: str) -> None:
        self.host.log(PLUGIN_NAME, message)

    def init(self) -> None:
        self._log("Plugin init")
        self.host.set_status_text(PLUGIN_DESCRIPTION)

    def request(self) -> ConnectionRequest:
        return ConnectionRequest(
            launcher_id=self.host.get_setting(SETTING_LAUNCHER) or None,
            target=self.host.get_setting(SETTING_SERVER),
        )

    def open_connection(self) -> SpawnResult:
        self._log("Plugin open connection")
        self.state = ConnectionState.OPENING
        req = self.request()

        if not req.target:
            result: SpawnResult = SpawnFailure(message=NO_TARGET_MESSAGE)
        else:
            executable = resolve(req.launcher_id, self.table)
            self._log(f"Launching {executable} {req.target}")
            result = spawn(executable, req.target)

        self.last_result = result
        if isinstance(result, SpawnSuccess):
            self.state = ConnectionState.OPENED
            self._log(f"Launcher started (pid {result.process_id})")
            self.host.notify_opened()
        else:
            self.state = ConnectionState.FAILED
            self._log(f"Launch failed: {result.message}")
            self.host.notify_error(result.message)
        return result

    def close_connection(self) -> bool:
        self._log("Plugin close connection")
        self.state = ConnectionState.CLOSED
        self.host.notify_closed()
        return True
