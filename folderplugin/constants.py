#===============================================================================
#  Folder_Launcher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Plugin identity, setting keys, the built-in launcher list and file/folder
#  naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

PLUGIN_NAME = "FOLDER"
PLUGIN_DESCRIPTION = "FOLDER - Open a folder"
PLUGIN_VERSION = "1.2.0.0"
PLUGIN_APPICON = "remmina-folder"

# Keys of the connection profile record
SETTING_SERVER = "server"
SETTING_LAUNCHER = "launcher"

# (identifier, display name). First entry is the auto-detect default.
LAUNCHERS = (
    ("xdg-open", "Automatically detected"),
    ("gnome-open", "Open for GNOME"),
    ("nautilus", "Nautilus"),
    ("pcmanfm", "PCManFM"),
    ("dolphin", "Dolphin Browser"),
)

HOME_ENV_VAR = "FOLDER_LAUNCHER_HOME"
PROFILES_FILE_NAME = "folder_profiles.json"
LOGS_DIR_NAME = ".folderplugin"
LOG_FILE_NAME = "plugin.log"

NO_TARGET_MESSAGE = "No folder or server specified."
