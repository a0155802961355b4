#===============================================================================
#  Folder_Launcher | profiles.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Load/save of named connection profiles (folder/server + launcher).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import SETTING_LAUNCHER, SETTING_SERVER


def default_profiles() -> Dict[str, Any]:
    return {
        "profiles": {},  # name -> {"server": ..., "launcher": ...}
    }


def _clean_profile(raw: Any) -> Optional[Dict[str, str]]:
    if not isinstance(raw, dict):
        return None
    return {
        SETTING_SERVER: str(raw.get(SETTING_SERVER) or ""),
        SETTING_LAUNCHER: str(raw.get(SETTING_LAUNCHER) or ""),
    }


def load_profiles(profiles_path: Path) -> Dict[str, Any]:
    """Load profiles from disk (or create defaults)."""
    d = default_profiles()
    if not profiles_path.exists():
        return d
    try:
        data = json.loads(profiles_path.read_text(encoding="utf-8"))
    except Exception:
        return d
    if not isinstance(data, dict):
        return d
    for k in d:
        if k not in data:
            data[k] = d[k]
    if not isinstance(data["profiles"], dict):
        data["profiles"] = {}
    # Drop malformed entries, fill in missing keys
    cleaned = {}
    for name, raw in data["profiles"].items():
        prof = _clean_profile(raw)
        if prof is not None:
            cleaned[str(name)] = prof
    data["profiles"] = cleaned
    return data


def save_profiles(profiles_path: Path, data: Dict[str, Any]) -> None:
    """Persist profiles to disk."""
    profiles_path.parent.mkdir(parents=True, exist_ok=True)
    profiles_path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def get_profile(data: Dict[str, Any], name: str) -> Optional[Dict[str, str]]:
    prof = data.get("profiles", {}).get(name)
    return dict(prof) if prof is not None else None


def set_profile(data: Dict[str, Any], name: str, server: str, launcher: str = "") -> None:
    data.setdefault("profiles", {})[name] = {
        SETTING_SERVER: server,
        SETTING_LAUNCHER: launcher or "",
    }


def remove_profile(data: Dict[str, Any], name: str) -> bool:
    """Remove a profile; False when it did not exist."""
    return data.setdefault("profiles", {}).pop(name, None) is not None
