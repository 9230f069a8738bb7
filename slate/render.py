from __future__ import annotations

import datetime as dt
import shutil
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError, TemplateNotFound, select_autoescape

from .content import Page
from .errors import PreconditionError, RenderError

BLOG_INDEX_PATH = Path("blog") / "index.html"


def format_date(value: Optional[dt.date], month: str = "%B") -> str:
    # January 2, 2006
    if value is None:
        return ""
    return f"{value.strftime(month)} {value.day}, {value.year}"


def create_environment(templates_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
    )
    env.filters["format_date"] = format_date
    return env


def read_template(env: Environment, name: str) -> Template:
    try:
        return env.get_template(name)
    except TemplateNotFound as exc:
        raise PreconditionError(f"Missing template: {exc.name}", name) from exc
    except TemplateError as exc:
        raise PreconditionError(f"Error parsing {name} template: {exc}", name) from exc


def load_templates(templates_dir: Path, *names: str) -> list[Template]:
    env = create_environment(templates_dir)
    return [read_template(env, name) for name in names]


def page_context(page: Page) -> dict:
    return {
        "page": page,
        "path": page.path,
        "url": page.url,
        "title": page.title,
        "date": page.date,
        "content": page.content,
    }


def write_template(template: Template, context: dict, output_path: Path) -> Path:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as fh:
            template.stream(**context).dump(fh)
    except (OSError, TemplateError) as exc:
        raise RenderError(f"Could not render {output_path}: {exc}", output_path) from exc
    return output_path


def render_page(template: Template, page: Page, output_path: Path) -> Path:
    return write_template(template, page_context(page), Path(output_path))


def render_blog_index(template: Template, posts: list[Page], output_dir: Path) -> Path:
    return write_template(template, {"posts": posts}, Path(output_dir) / BLOG_INDEX_PATH)


def copy_stylesheet(static_dir: Path, output_dir: Path, name: str = "styles.css") -> Optional[Path]:
    source = Path(static_dir) / name
    if not source.is_file():
        return None
    dest = Path(output_dir) / name
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, dest)
    except OSError as exc:
        raise RenderError(f"Could not copy {source} to {dest}: {exc}", dest) from exc
    return dest
