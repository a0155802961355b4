#===============================================================================
#  Folder_Launcher | spawner.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Starts the launcher as a detached child process and reports the outcome.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
import subprocess
from typing import List

from .models import SpawnFailure, SpawnResult, SpawnSuccess


def _windows_creation_flags() -> int:
    if os.name != "nt":
        return 0
    # Only defined by subprocess on Windows
    return subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP


def build_argv(executable_name: str, target: str) -> List[str]:
    """Program name followed by the target, nothing else."""
    argv: List[str] = []
    argv.append(executable_name)
    argv.append(target)
    return argv


def spawn(executable_name: str, target: str) -> SpawnResult:
    """Start `executable_name target` without waiting for it.

    The program is looked up on PATH and no shell is involved. The child gets
    its own session and null stdio, so closing the connection (or exiting
    this process) leaves it running.

    Returns SpawnSuccess(pid) once the OS accepts the process, otherwise
    SpawnFailure with the OS message. Single attempt, no retry.
    """
    argv = build_argv(executable_name, target)
    try:
        p = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            close_fds=os.name != "nt",
            start_new_session=os.name != "nt",
            creationflags=_windows_creation_flags(),
        )
    except (OSError, ValueError) as e:
        # ValueError: embedded NUL in an argument
        return SpawnFailure(message=str(e))
    return SpawnSuccess(process_id=p.pid)
