from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import SiteConfig
from .errors import SlateError

STARTER_INDEX_MD = """# Welcome to My Site

This is your home page. Edit this file at content/index.md.

Check out my [blog](/blog/).
"""

STARTER_BLOG_POST = """---
title: Hello World
date: 2025-01-17
---

This is your first blog post. Edit this file or create new .md files in content/blog/.
"""

STARTER_HOME_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <link rel="stylesheet" href="/styles.css">
</head>
<body>
    <main>
        {{ content }}
    </main>
</body>
</html>
"""

STARTER_POST_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <link rel="stylesheet" href="/styles.css">
</head>
<body>
    <header>
        <nav>
            <a href="/">Home</a>
            <a href="/blog/">Blog</a>
        </nav>
    </header>
    <main>
        <h1>{{ title }}</h1>
        {% if date %}<p class="post-date">{{ date|format_date }}</p>{% endif %}
        {{ content }}
    </main>
</body>
</html>
"""

STARTER_BLOG_INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Posts</title>
    <link rel="stylesheet" href="/styles.css">
</head>
<body>
    <header>
        <nav>
            <a href="/">Home</a>
        </nav>
    </header>
    <main>
        <h1>Posts</h1>
        <ul class="post-list">
            {% for post in posts %}
            <li>
                <a href="{{ post.url }}">{{ post.title }}</a>
                {% if post.date %}<span class="post-date">{{ post.date|format_date("%b") }}</span>{% endif %}
            </li>
            {% endfor %}
        </ul>
    </main>
</body>
</html>
"""

STARTER_CSS = """@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap');
@import url('https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500&display=swap');

* {
    margin: 0;
    padding: 0;
    box-sizing: border-box;
}

html {
    font-size: 18px;
    line-height: 1.6;
}

body {
    font-family: "Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
    color: #333;
    background-color: #fff;
    padding: 2rem 1rem;
}

main,
header {
    max-width: 680px;
    margin: 0 auto;
}

header {
    margin-bottom: 2rem;
}

nav {
    display: flex;
    gap: 1.5rem;
}

nav a {
    color: #666;
    font-size: 0.9rem;
}

.post-date {
    color: #666;
    font-size: 0.9rem;
    margin-bottom: 1.5rem;
}

.post-list {
    list-style: none;
    padding-left: 0;
}

.post-list li {
    padding: 0.5rem 0;
    border-bottom: 1px solid #eee;
}

.post-list li:last-child {
    border-bottom: none;
}

.post-list .post-date {
    margin-left: 0.5rem;
    margin-bottom: 0;
}

h1, h2, h3 {
    margin-top: 2rem;
    margin-bottom: 1rem;
    font-weight: 600;
    line-height: 1.3;
}

h1 {
    font-size: 2rem;
    margin-top: 0;
}

p, ul, ol, pre, blockquote, table {
    margin-bottom: 1rem;
}

ul, ol {
    padding-left: 1.5rem;
}

a {
    color: #0066cc;
    text-decoration: none;
}

a:hover {
    text-decoration: underline;
}

code {
    font-family: "JetBrains Mono", monospace;
    font-size: 0.9rem;
    background-color: #f4f4f4;
    padding: 0.15rem 0.4rem;
    border-radius: 3px;
}

pre,
.codehilite {
    background-color: #f4f4f4;
    padding: 1rem;
    border-radius: 5px;
    overflow-x: auto;
}

pre code {
    background: none;
    padding: 0;
}

blockquote {
    border-left: 3px solid #ddd;
    padding-left: 1rem;
    color: #666;
}

img {
    max-width: 100%;
    height: auto;
}

table {
    width: 100%;
    border-collapse: collapse;
}

th, td {
    border: 1px solid #ddd;
    padding: 0.5rem;
    text-align: left;
}
"""


def starter_files(config: SiteConfig) -> dict[Path, str]:
    templates = config.templates_dir
    return {
        config.content_dir / config.index_name: STARTER_INDEX_MD,
        config.content_dir / config.blog_segment / "hello.md": STARTER_BLOG_POST,
        templates / config.home_template: STARTER_HOME_TEMPLATE,
        templates / config.post_template: STARTER_POST_TEMPLATE,
        templates / config.blog_index_template: STARTER_BLOG_INDEX_TEMPLATE,
        config.static_dir / config.stylesheet: STARTER_CSS,
    }


def init_project(config: Optional[SiteConfig] = None) -> list[Path]:
    """Create the starter directories and files. Existing files are kept."""
    config = config or SiteConfig()
    created: list[Path] = []
    dirs = [
        config.content_dir,
        config.content_dir / config.blog_segment,
        config.templates_dir,
        config.static_dir,
    ]
    for directory in dirs:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SlateError(f"Error creating directory {directory}: {exc}", directory) from exc
        print(f"Created: {directory.as_posix()}/")

    for path, text in starter_files(config).items():
        if path.exists():
            print(f"Skipped (exists): {path.as_posix()}")
            continue
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise SlateError(f"Error creating file {path}: {exc}", path) from exc
        created.append(path)
        print(f"Created: {path.as_posix()}")

    print("\nProject initialized! Run `slate build` to generate your site.")
    return created
