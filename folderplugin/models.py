#===============================================================================
#  Folder_Launcher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Shared data models: launcher table, connection request, spawn results and
#  connection states.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .constants import LAUNCHERS


@dataclass(frozen=True)
class LauncherEntry:
    """A program that can open a folder or server address."""
    identifier: str     # program name, looked up on PATH
    display_name: str   # label shown when choosing a launcher


class LauncherTable:
    """Ordered, read-only list of launchers.

    The first entry is the auto-detect default. Identifiers are unique.
    """

    def __init__(self, entries: Iterable[LauncherEntry]):
        entries = tuple(entries)
        if not entries:
            raise ValueError("Launcher table needs at least one entry.")
        seen = set()
        for e in entries:
            if e.identifier in seen:
                raise ValueError(f"Duplicate launcher identifier: {e.identifier}")
            seen.add(e.identifier)
        self._entries: Tuple[LauncherEntry, ...] = entries

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "LauncherTable":
        return cls(LauncherEntry(identifier=i, display_name=d) for i, d in pairs)

    @property
    def default(self) -> LauncherEntry:
        return self._entries[0]

    def identifiers(self) -> List[str]:
        return [e.identifier for e in self._entries]

    def display_name(self, identifier: str) -> Optional[str]:
        for e in self._entries:
            if e.identifier == identifier:
                return e.display_name
        return None

    def __iter__(self) -> Iterator[LauncherEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> LauncherEntry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"LauncherTable({list(self._entries)!r})"


DEFAULT_LAUNCHERS = LauncherTable.from_pairs(LAUNCHERS)


@dataclass(frozen=True)
class ConnectionRequest:
    launcher_id: Optional[str]  # None/"" -> auto-detect
    target: str                 # folder path or server address, passed as-is


@dataclass(frozen=True)
class SpawnSuccess:
    process_id: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class SpawnFailure:
    message: str  # OS diagnostic, unmodified

    @property
    def ok(self) -> bool:
        return False


SpawnResult = Union[SpawnSuccess, SpawnFailure]


class ConnectionState(Enum):
    IDLE = "idle"
    OPENING = "opening"
    OPENED = "opened"
    FAILED = "failed"
    CLOSED = "closed"
