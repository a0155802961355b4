import pytest

from folderplugin.models import DEFAULT_LAUNCHERS, LauncherEntry, LauncherTable
from folderplugin.resolver import available_launchers, resolve


@pytest.fixture
def table():
    return LauncherTable.from_pairs([("xdg-open", "Auto"), ("dolphin", "Dolphin")])


def test_none_resolves_to_first_entry(table):
    assert resolve(None, table) == "xdg-open"


def test_empty_string_resolves_to_first_entry(table):
    assert resolve("", table) == "xdg-open"


def test_known_launcher_passes_through(table):
    assert resolve("dolphin", table) == "dolphin"


@pytest.mark.parametrize("name", ["thunar", "/usr/bin/nemo", "my launcher"])
def test_unknown_launcher_is_used_verbatim(table, name):
    assert resolve(name, table) == name


def test_resolve_is_repeatable(table):
    assert resolve(None, table) == resolve(None, table)
    assert resolve("dolphin", table) == resolve("dolphin", table)


def test_default_table_auto_detects_xdg_open():
    assert resolve(None) == "xdg-open"
    assert DEFAULT_LAUNCHERS.identifiers() == ["xdg-open", "gnome-open", "nautilus", "pcmanfm", "dolphin"]
    assert DEFAULT_LAUNCHERS.display_name("dolphin") == "Dolphin Browser"
    assert DEFAULT_LAUNCHERS.display_name("thunar") is None


def test_table_rejects_empty_and_duplicates():
    with pytest.raises(ValueError):
        LauncherTable([])
    with pytest.raises(ValueError):
        LauncherTable.from_pairs([("a", "A"), ("a", "again")])


def test_table_keeps_order_and_indexing(table):
    assert len(table) == 2
    assert table[1] == LauncherEntry("dolphin", "Dolphin")
    assert [e.identifier for e in table] == ["xdg-open", "dolphin"]


def test_available_launchers_filters_by_path(monkeypatch, table):
    found = {"dolphin": "/usr/bin/dolphin"}
    monkeypatch.setattr("shutil.which", lambda name: found.get(name))
    assert available_launchers(table) == [LauncherEntry("dolphin", "Dolphin")]
