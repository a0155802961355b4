import sys
from pathlib import Path

import pytest


@pytest.fixture
def noop_script(tmp_path: Path) -> Path:
    """A Python file that exits immediately, usable as a spawn target."""
    script = tmp_path / "noop.py"
    script.write_text("pass\n", encoding="utf-8")
    return script


@pytest.fixture
def python_exe() -> str:
    return sys.executable


class FakePopen:
    calls = []

    def __init__(self, args=None, **kw):  # noqa: ANN001, ANN003
        FakePopen.calls.append((list(args), kw))
        self.pid = 4242


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.calls = []
    monkeypatch.setattr("subprocess.Popen", FakePopen)
    return FakePopen
