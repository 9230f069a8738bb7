from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from .builder import build_site
from .config import DEFAULT_CONFIG, SiteConfig, load_config, resolve_config
from .errors import SlateError
from .scaffold import init_project
from .serve import serve

COMMANDS = ("init", "build", "serve")
USAGE = "Usage: slate [init|build|serve]"


def run_build(config: SiteConfig) -> None:
    start = time.perf_counter()
    result = build_site(config)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"Site generated in: {config.output_dir.as_posix()} ({len(result.written)} files)")


def build_parser(config_path: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="slate", description="Minimal Markdown static site generator.")
    parser.add_argument("command", nargs="?", default="build", help="One of: init, build, serve (default: build).")
    parser.add_argument("--config", default=config_path, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--content", help="Directory containing Markdown content (default: content).")
    parser.add_argument("--templates", help="Directory containing page templates (default: templates).")
    parser.add_argument("--static", help="Directory containing the stylesheet (default: static).")
    parser.add_argument("--output", help="Output directory for the site (default: public).")
    parser.add_argument("--port", type=int, help="Port for the preview server (default: 8080).")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", default=DEFAULT_CONFIG)
    pre_args, _ = pre_parser.parse_known_args(argv)

    try:
        config_data = load_config(Path(pre_args.config))
    except SlateError as exc:
        print(exc, file=sys.stderr)
        return 1

    parser = build_parser(pre_args.config)
    args = parser.parse_args(argv)

    if args.command not in COMMANDS:
        print(f"Unknown command: {args.command}")
        print(USAGE)
        return 0

    config = resolve_config(
        config_data,
        content=args.content,
        templates=args.templates,
        static=args.static,
        output=args.output,
        port=args.port,
    )

    try:
        if args.command == "init":
            init_project(config)
        elif args.command == "serve":
            serve(config)
        else:
            run_build(config)
    except SlateError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0
