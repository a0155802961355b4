import json
from pathlib import Path

from folderplugin.profiles import (
    default_profiles,
    get_profile,
    load_profiles,
    remove_profile,
    save_profiles,
    set_profile,
)


def test_missing_file_gives_defaults(tmp_path: Path):
    assert load_profiles(tmp_path / "nope.json") == default_profiles()


def test_corrupt_file_gives_defaults(tmp_path: Path):
    path = tmp_path / "folder_profiles.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_profiles(path) == default_profiles()


def test_save_then_load(tmp_path: Path):
    path = tmp_path / "sub" / "folder_profiles.json"
    data = default_profiles()
    set_profile(data, "docs", "/home/user/Documents", "nautilus")
    set_profile(data, "share", "smb://nas/share")
    save_profiles(path, data)

    loaded = load_profiles(path)
    assert get_profile(loaded, "docs") == {"server": "/home/user/Documents", "launcher": "nautilus"}
    assert get_profile(loaded, "share") == {"server": "smb://nas/share", "launcher": ""}
    assert get_profile(loaded, "missing") is None


def test_load_fills_missing_keys_and_drops_bad_entries(tmp_path: Path):
    path = tmp_path / "folder_profiles.json"
    path.write_text(json.dumps({"profiles": {"a": {"server": "/a"}, "b": "oops"}}), encoding="utf-8")
    loaded = load_profiles(path)
    assert loaded["profiles"] == {"a": {"server": "/a", "launcher": ""}}


def test_remove_profile():
    data = default_profiles()
    set_profile(data, "docs", "/docs")
    assert remove_profile(data, "docs") is True
    assert remove_profile(data, "docs") is False
    assert data["profiles"] == {}
