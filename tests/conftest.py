from pathlib import Path

import pytest

from slate.config import SiteConfig
from slate.scaffold import init_project


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def site(tmp_path, monkeypatch, capsys):
    """A freshly scaffolded project in a temporary working directory."""
    monkeypatch.chdir(tmp_path)
    init_project(SiteConfig())
    capsys.readouterr()
    return tmp_path
