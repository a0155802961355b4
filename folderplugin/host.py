#===============================================================================
#  Folder_Launcher | host.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Services the plugin needs from its host application (settings access,
#  connection signals, log sink) and a standalone host backed by a saved
#  connection profile.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import datetime
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from .constants import LOG_FILE_NAME, LOGS_DIR_NAME



def log_path_for(base_dir: Path) -> Path:
    return base_dir / LOGS_DIR_NAME / "logs" / LOG_FILE_NAME


def format_log_line(component: str, message: str) -> str:
    ts = datetime.datetime.now().isoformat(timespec="seconds")
    return f"{ts} [{component}] {message}"


def append_log(log_file: Path, line: str) -> bool:
    """Append one line to a log file. False when the file can't be written."""
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a", encoding="utf-8", errors="ignore") as f:
            f.write(line + "\n")
    except OSError:
        return False
    return True


class HostServices(ABC):
    """What the plugin may call on the application hosting it."""

    @abstractmethod
    def get_setting(self, key: str) -> str:
        """Value of `key` in the current connection profile ("" when unset)."""

    @abstractmethod
    def notify_opened(self) -> None:
        ...

    @abstractmethod
    def notify_closed(self) -> None:
        ...

    @abstractmethod
    def notify_error(self, message: str) -> None:
        ...

    @abstractmethod
    def log(self, component: str, message: str) -> None:
        ...

    def set_status_text(self, text: str) -> None:
        """Status line shown for the connection. Hosts without one ignore it."""


class ProfileHost(HostServices):
    """Host used when running standalone.

    Settings come from a profile dict; signals are recorded in `events` so the
    caller can inspect what happened; log lines go to a file (and to stderr
    when verbose, or when the file can't be written).
    """

    def __init__(self, profile: Dict[str, str], log_file: Optional[Path] = None, verbose: bool = False):
        self.profile = dict(profile or {})
        self.log_file = log_file
        self.verbose = verbose
        self.events: List[str] = []
        self.error_message = ""
        self.status_text = ""

    def get_setting(self, key: str) -> str:
        return str(self.profile.get(key) or "")

    def notify_opened(self) -> None:
        self.events.append("opened")

    def notify_closed(self) -> None:
        self.events.append("closed")

    def notify_error(self, message: str) -> None:
        self.events.append("error")
        self.error_message = message

    def set_status_text(self, text: str) -> None:
        self.status_text = text

    def log(self, component: str, message: str) -> None:
        line = format_log_line(component, message)
        lost = self.log_file is not None and not append_log(self.log_file, line)
        if self.verbose or lost:
            print(line, file=sys.stderr)
