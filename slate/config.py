from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from .errors import ConfigError
from .utils import parse_int

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

import yaml

DEFAULT_CONFIG = "slate.toml"
DEFAULT_PORT = 8080


@dataclass(frozen=True)
class SiteConfig:
    """Paths and settings for one site, relative to the working directory."""

    content_dir: Path = Path("content")
    templates_dir: Path = Path("templates")
    static_dir: Path = Path("static")
    output_dir: Path = Path("public")
    port: int = DEFAULT_PORT
    stylesheet: str = "styles.css"
    home_template: str = "home.html"
    post_template: str = "post.html"
    blog_index_template: str = "blog_index.html"
    blog_segment: str = "blog"
    index_name: str = "index.md"


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file {path}: {exc}", path) from exc
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}", path) from exc
        return data
    if suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in config file {path}: {exc}", path) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"YAML config must be a mapping: {path}", path)
        return data
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}", path) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"JSON config must be a mapping: {path}", path)
    return data


def resolve_config(data: Optional[dict] = None, **overrides: object) -> SiteConfig:
    """Fold config-file values and CLI overrides into a SiteConfig.

    Overrides that are None are ignored, so unset CLI flags fall through to
    the config file and then to the defaults.
    """
    data = data or {}

    def pick(key: str) -> object:
        value = overrides.get(key)
        return data.get(key) if value is None else value

    values = {}
    for key, attr in (
        ("content", "content_dir"),
        ("templates", "templates_dir"),
        ("static", "static_dir"),
        ("output", "output_dir"),
    ):
        value = pick(key)
        if value is not None and str(value).strip():
            values[attr] = Path(str(value).strip())
    values["port"] = parse_int(pick("port"), DEFAULT_PORT)
    stylesheet = pick("stylesheet")
    if stylesheet:
        values["stylesheet"] = str(stylesheet)
    return replace(SiteConfig(), **values)
