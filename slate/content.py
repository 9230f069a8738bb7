from __future__ import annotations

import datetime as dt
import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import markdown
import yaml
from markupsafe import Markup

from .errors import LoadError
from .utils import strip_suffix_ci, to_posix

DELIMITER = b"---"
CLOSING_DELIMITER = b"\n" + DELIMITER
MARKDOWN_EXT = ".md"
HTML_EXT = ".html"
DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
WORD_START_RE = re.compile(r"(?<!\w)\w")
MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "codehilite"]
MARKDOWN_EXTENSION_CONFIGS = {"codehilite": {"guess_lang": False, "cssclass": "codehilite"}}

PathLike = Union[str, Path]


@dataclass(frozen=True)
class FrontMatter:
    title: str = ""
    date: str = ""


@dataclass(frozen=True)
class Page:
    """One rendered content file.

    ``content`` is HTML produced by the Markdown converter and is trusted as-is
    by the templates. ``date`` is None when the front matter has no usable date.
    """

    path: str
    url: str
    title: str
    date: Optional[dt.date]
    content: Markup


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain text."""


FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _scalar(value: object) -> str:
    if value is None or isinstance(value, (list, dict)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def decode_front_matter(block: bytes) -> FrontMatter:
    data = yaml.load(block, Loader=FrontMatterLoader)
    if data is None:
        return FrontMatter()
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping, got {type(data).__name__}")
    return FrontMatter(title=_scalar(data.get("title")), date=_scalar(data.get("date")))


def parse_front_matter(content: bytes, source: Optional[PathLike] = None) -> tuple[FrontMatter, bytes]:
    """Split a ``---`` delimited YAML header off the start of ``content``.

    Returns the decoded header and the remaining Markdown body. When the input
    has no header, or the header is never closed, the input is returned
    untouched with an empty FrontMatter. A header that fails to decode is
    reported on stderr and treated as empty.
    """
    if not content.startswith(DELIMITER):
        return FrontMatter(), content

    rest = content[len(DELIMITER) :]
    end = rest.find(CLOSING_DELIMITER)
    if end == -1:
        return FrontMatter(), content

    block = rest[:end]
    if block.startswith(b"\n"):
        block = block[1:]
    try:
        front_matter = decode_front_matter(block)
    except (yaml.YAMLError, ValueError) as exc:
        label = source if source is not None else "<input>"
        print(f"Warning: ignoring invalid front matter in {label}: {exc}", file=sys.stderr)
        front_matter = FrontMatter()

    body = rest[end + len(CLOSING_DELIMITER) :]
    if body.startswith(b"\n"):
        body = body[1:]
    return front_matter, body


def parse_date(value: Optional[str]) -> Optional[dt.date]:
    if not value or not DATE_RE.fullmatch(value):
        return None
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        return None


def relative_path(path: PathLike, content_root: PathLike = "content") -> str:
    rel = to_posix(path)
    root = to_posix(content_root).rstrip("/")
    if root and rel.startswith(root):
        rel = rel[len(root) :]
    return rel


def path_to_url(path: PathLike, content_root: PathLike = "content") -> str:
    # content/blog/my-post.md -> /blog/my-post.html
    url = relative_path(path, content_root)
    return strip_suffix_ci(url, MARKDOWN_EXT) + HTML_EXT


def extract_title(path: PathLike) -> str:
    name = to_posix(path).rsplit("/", 1)[-1]
    name = strip_suffix_ci(name, MARKDOWN_EXT)
    name = name.replace("_", " ").replace("-", " ")
    return WORD_START_RE.sub(lambda match: match.group(0).upper(), name)


def _warn_access(path: str, exc: OSError) -> None:
    print(f"Warning: could not access {path} - {exc.strerror or exc}", file=sys.stderr)


def _walk(directory: str, files: list[str]) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        _warn_access(directory, exc)
        return
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            _warn_access(entry.path, exc)
            continue
        if is_dir:
            _walk(entry.path, files)
        elif entry.name.lower().endswith(MARKDOWN_EXT):
            files.append(entry.path)


def find_markdown_files(root: PathLike) -> list[str]:
    """Return every ``.md`` file under ``root`` in lexical walk order."""
    files: list[str] = []
    _walk(os.fspath(root), files)
    return files


def new_markdown() -> markdown.Markdown:
    return markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )


def load_page(path: PathLike, content_root: PathLike = "content", md: Optional[markdown.Markdown] = None) -> Page:
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise LoadError(f"Could not read {path}: {exc}", path) from exc

    front_matter, body = parse_front_matter(raw, source=path)
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise LoadError(f"Could not decode {path} as UTF-8: {exc}", path) from exc

    md = md or new_markdown()
    try:
        html_content = md.convert(text)
    except Exception as exc:
        raise LoadError(f"Could not convert {path} to HTML: {exc}", path) from exc
    finally:
        md.reset()

    title = front_matter.title or extract_title(path)
    return Page(
        path=to_posix(path),
        url=path_to_url(path, content_root),
        title=title,
        date=parse_date(front_matter.date),
        content=Markup(html_content),
    )


def load_pages(paths: list[str], content_root: PathLike = "content") -> list[Page]:
    md = new_markdown()
    return [load_page(path, content_root, md) for path in paths]
