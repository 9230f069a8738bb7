"""Tests for the slate command line and config handling."""

from pathlib import Path

import pytest

from slate import cli
from slate.config import DEFAULT_PORT, SiteConfig, load_config, resolve_config
from slate.errors import ConfigError

from conftest import write


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestLoadConfig:
    def test_missing_file_is_empty(self, tmp_path):
        assert load_config(tmp_path / "slate.toml") == {}

    def test_toml(self, tmp_path):
        path = write(tmp_path / "slate.toml", 'output = "dist"\nport = 9000\n')
        assert load_config(path) == {"output": "dist", "port": 9000}

    def test_yaml(self, tmp_path):
        path = write(tmp_path / "slate.yml", "content: pages\n")
        assert load_config(path) == {"content": "pages"}

    def test_empty_yaml(self, tmp_path):
        assert load_config(write(tmp_path / "slate.yaml", "")) == {}

    def test_json(self, tmp_path):
        path = write(tmp_path / "slate.json", '{"static": "assets"}')
        assert load_config(path) == {"static": "assets"}

    @pytest.mark.parametrize(
        "name, text",
        [
            ("slate.toml", "output = "),
            ("slate.yml", "content: [pages"),
            ("slate.yml", "- a\n- b\n"),
            ("slate.json", "{not json"),
            ("slate.json", "[1, 2]"),
        ],
    )
    def test_invalid_files(self, tmp_path, name, text):
        with pytest.raises(ConfigError):
            load_config(write(tmp_path / name, text))


class TestResolveConfig:
    def test_defaults(self):
        config = resolve_config()
        assert config == SiteConfig()
        assert config.output_dir == Path("public")
        assert config.port == DEFAULT_PORT

    def test_file_values(self):
        config = resolve_config({"output": "dist", "port": "9000", "stylesheet": "site.css"})
        assert config.output_dir == Path("dist")
        assert config.port == 9000
        assert config.stylesheet == "site.css"

    def test_overrides_win_over_file(self):
        config = resolve_config({"output": "dist", "port": 9000}, output="build", port=None)
        assert config.output_dir == Path("build")
        assert config.port == 9000

    def test_bad_port_falls_back(self):
        assert resolve_config({"port": "http"}).port == DEFAULT_PORT


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class TestMain:
    def test_default_command_builds(self, site, capsys):
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert "Build completed in" in out
        assert (site / "public" / "index.html").exists()

    def test_build_with_flags(self, site):
        assert cli.main(["build", "--output", "dist"]) == 0
        assert (site / "dist" / "blog" / "index.html").exists()

    def test_config_file_is_used(self, site):
        write(site / "slate.toml", 'output = "from-config"\n')
        assert cli.main(["build"]) == 0
        assert (site / "from-config" / "index.html").exists()

    def test_unknown_command_prints_usage(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["deploy"]) == 0
        out = capsys.readouterr().out
        assert "Unknown command: deploy" in out
        assert "Usage: slate [init|build|serve]" in out

    def test_build_without_project_fails(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["build"]) == 1
        assert "Missing content/ directory" in capsys.readouterr().err

    def test_invalid_config_fails(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        write(tmp_path / "slate.toml", "output = ")
        assert cli.main(["build"]) == 1
        assert "Invalid TOML" in capsys.readouterr().err

    def test_init(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert cli.main(["init"]) == 0
        assert (tmp_path / "templates" / "blog_index.html").exists()
        assert "Project initialized!" in capsys.readouterr().out

    def test_serve_without_output_fails(self, site, capsys):
        assert cli.main(["serve"]) == 1
        assert "Missing public/ directory" in capsys.readouterr().err

    def test_serve_uses_config(self, site, monkeypatch):
        seen = []
        monkeypatch.setattr(cli, "serve", seen.append)
        assert cli.main(["serve", "--port", "9001"]) == 0
        assert seen[0].port == 9001
