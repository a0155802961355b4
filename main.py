#===============================================================================
#  Folder_Launcher  |  Open a folder or server address with a file manager
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Command-line front end for the FOLDER connection plugin. Opens a folder
#  path or server address with a launcher program (xdg-open, nautilus,
#  dolphin, ...) as a detached process, either directly or from a saved
#  connection profile.
#
#  Commands
#  --------
#    run <launcher> <target>          -> spawn now ("" launcher = auto-detect)
#    open <profile>                   -> open a saved profile
#    launchers                        -> list known launchers
#    profiles                         -> list saved profiles
#    save <name> <target> [--launcher ID]
#    remove <name>
#
#  Folder Conventions
#  ------------------
#    <base>/folder_profiles.json      -> saved connection profiles
#    <base>/.folderplugin/logs/       -> plugin.log
#
#  <base> is --base-dir, else $FOLDER_LAUNCHER_HOME, else this folder.
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#===============================================================================

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from folderplugin.constants import (
    HOME_ENV_VAR,
    NO_TARGET_MESSAGE,
    PLUGIN_DESCRIPTION,
    PLUGIN_NAME,
    PLUGIN_VERSION,
    PROFILES_FILE_NAME,
    SETTING_LAUNCHER,
    SETTING_SERVER,
)
from folderplugin.host import ProfileHost, log_path_for
from folderplugin.models import DEFAULT_LAUNCHERS, SpawnSuccess
from folderplugin.plugin import FolderPlugin
from folderplugin.profiles import get_profile, load_profiles, remove_profile, save_profiles, set_profile
from folderplugin.resolver import available_launchers, resolve
from folderplugin.spawner import spawn

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def resolve_base_dir(arg: Optional[str]) -> Path:
    if arg:
        return Path(arg)
    env = os.environ.get(HOME_ENV_VAR, "").strip()
    if env:
        return Path(env)
    return Path(__file__).parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="folder-launcher", description=PLUGIN_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"{PLUGIN_NAME} {PLUGIN_VERSION}")
    parser.add_argument("--base-dir", default=None, help="Folder holding profiles and logs.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Echo log lines to stderr.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("run", help="Open a target with a launcher now.")
    p.add_argument("launcher", help='Program name; "" picks the auto-detected launcher.')
    p.add_argument("target", help="Folder path or server address.")

    p = sub.add_parser("open", help="Open a saved profile.")
    p.add_argument("profile")

    sub.add_parser("launchers", help="List known launchers.")
    sub.add_parser("profiles", help="List saved profiles.")

    p = sub.add_parser("save", help="Create or replace a profile.")
    p.add_argument("name")
    p.add_argument("target")
    p.add_argument("--launcher", default="", help="Program name (default: auto-detect).")

    p = sub.add_parser("remove", help="Delete a profile.")
    p.add_argument("name")
    return parser


def cmd_run(args, base_dir: Path) -> int:
    host = ProfileHost({}, log_file=log_path_for(base_dir), verbose=args.verbose)
    if not args.target:
        host.log(PLUGIN_NAME, f"Launch failed: {NO_TARGET_MESSAGE}")
        print(NO_TARGET_MESSAGE, file=sys.stderr)
        return EXIT_FAILED

    executable = resolve(args.launcher or None, DEFAULT_LAUNCHERS)
    result = spawn(executable, args.target)
    if isinstance(result, SpawnSuccess):
        host.log(PLUGIN_NAME, f"Launched {executable} {args.target} (pid {result.process_id})")
        print(result.process_id)
        return EXIT_OK
    host.log(PLUGIN_NAME, f"Launch failed: {result.message}")
    print(result.message, file=sys.stderr)
    return EXIT_FAILED


def cmd_open(args, base_dir: Path) -> int:
    data = load_profiles(base_dir / PROFILES_FILE_NAME)
    profile = get_profile(data, args.profile)
    if profile is None:
        print(f"Unknown profile: {args.profile}", file=sys.stderr)
        return EXIT_USAGE

    host = ProfileHost(profile, log_file=log_path_for(base_dir), verbose=args.verbose)
    plugin = FolderPlugin(host)
    plugin.init()
    result = plugin.open_connection()
    # The launched program outlives the connection
    plugin.close_connection()
    if isinstance(result, SpawnSuccess):
        print(result.process_id)
        return EXIT_OK
    print(result.message, file=sys.stderr)
    return EXIT_FAILED


def cmd_launchers(args, base_dir: Path) -> int:
    installed = {e.identifier for e in available_launchers(DEFAULT_LAUNCHERS)}
    for i, e in enumerate(DEFAULT_LAUNCHERS):
        mark = "*" if e.identifier in installed else " "
        default = " (default)" if i == 0 else ""
        print(f"{mark} {e.identifier:<12} {e.display_name}{default}")
    return EXIT_OK


def cmd_profiles(args, base_dir: Path) -> int:
    data = load_profiles(base_dir / PROFILES_FILE_NAME)
    for name, prof in sorted(data["profiles"].items()):
        launcher = prof.get(SETTING_LAUNCHER) or "auto"
        print(f"{name}\t{launcher}\t{prof.get(SETTING_SERVER, '')}")
    return EXIT_OK


def cmd_save(args, base_dir: Path) -> int:
    path = base_dir / PROFILES_FILE_NAME
    data = load_profiles(path)
    set_profile(data, args.name, args.target, args.launcher)
    save_profiles(path, data)
    return EXIT_OK


def cmd_remove(args, base_dir: Path) -> int:
    path = base_dir / PROFILES_FILE_NAME
    data = load_profiles(path)
    if not remove_profile(data, args.name):
        print(f"Unknown profile: {args.name}", file=sys.stderr)
        return EXIT_USAGE
    save_profiles(path, data)
    return EXIT_OK


COMMANDS = {
    "run": cmd_run,
    "open": cmd_open,
    "launchers": cmd_launchers,
    "profiles": cmd_profiles,
    "save": cmd_save,
    "remove": cmd_remove,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    base_dir = resolve_base_dir(args.base_dir)
    return COMMANDS[args.command](args, base_dir)


if __name__ == "__main__":
    sys.exit(main())
