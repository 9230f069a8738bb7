from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field, replace
from typing import Optional

from .content import Page, relative_path
from .utils import to_posix

HOME_URL = "/index.html"


@dataclass
class SiteLayout:
    home: Optional[Page] = None
    posts: list[Page] = field(default_factory=list)
    unrendered: list[Page] = field(default_factory=list)


def is_home_page(page: Page, content_root: object = "content", index_name: str = "index.md") -> bool:
    root = to_posix(content_root).rstrip("/")
    suffix = f"{root}/{index_name}" if root else index_name
    return to_posix(page.path).endswith(suffix)


def is_blog_post(page: Page, blog_segment: str = "blog", content_root: object = "content") -> bool:
    return f"/{blog_segment}/" in relative_path(page.path, content_root)


def post_sort_key(page: Page) -> dt.date:
    return page.date or dt.date.min


def sort_posts(posts: list[Page]) -> list[Page]:
    """Newest first; undated posts sink to the end and ties keep input order."""
    return sorted(posts, key=post_sort_key, reverse=True)


def assemble_site(
    pages: list[Page],
    content_root: object = "content",
    blog_segment: str = "blog",
    index_name: str = "index.md",
) -> SiteLayout:
    layout = SiteLayout()
    posts = []
    for page in pages:
        if is_home_page(page, content_root, index_name):
            layout.home = replace(page, url=HOME_URL)
        elif is_blog_post(page, blog_segment, content_root):
            posts.append(page)
        else:
            layout.unrendered.append(page)
    layout.posts = sort_posts(posts)
    return layout
