from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import SiteConfig
from .content import find_markdown_files, load_pages
from .errors import PreconditionError
from .pages import SiteLayout, assemble_site
from .render import copy_stylesheet, load_templates, render_blog_index, render_page


@dataclass
class BuildResult:
    layout: SiteLayout
    written: list[Path] = field(default_factory=list)
    stylesheet: Optional[Path] = None


def check_directories(config: SiteConfig) -> None:
    for path in (config.content_dir, config.templates_dir):
        if not path.is_dir():
            raise PreconditionError(f"Missing {path.as_posix()}/ directory. Did you run `slate init`?", path)


def build_site(config: Optional[SiteConfig] = None) -> BuildResult:
    """Run the full build for ``config`` and return what was written.

    Stops at the first error. Output files written before the failure are
    left in place.
    """
    config = config or SiteConfig()
    check_directories(config)

    markdown_files = find_markdown_files(config.content_dir)
    print("Found markdown files:")
    for path in markdown_files:
        print(f" - {path}")

    pages = load_pages(markdown_files, config.content_dir)

    home_tmpl, post_tmpl, blog_index_tmpl = load_templates(
        config.templates_dir,
        config.home_template,
        config.post_template,
        config.blog_index_template,
    )

    layout = assemble_site(pages, config.content_dir, config.blog_segment, config.index_name)
    for page in layout.unrendered:
        print(f"Skipped (not rendered): {page.path}")

    result = BuildResult(layout=layout)
    output_dir = config.output_dir

    def report(path: Path) -> None:
        result.written.append(path)
        print(f"Generated: {path.as_posix()}")

    if layout.home is not None:
        report(render_page(home_tmpl, layout.home, output_dir / "index.html"))

    for post in layout.posts:
        report(render_page(post_tmpl, post, output_dir / post.url.lstrip("/")))

    report(render_blog_index(blog_index_tmpl, layout.posts, output_dir))

    result.stylesheet = copy_stylesheet(config.static_dir, output_dir, config.stylesheet)
    if result.stylesheet is not None:
        print(f"Copied: {result.stylesheet.as_posix()}")
    return result
