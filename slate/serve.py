from __future__ import annotations

from functools import partial
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional

from .config import SiteConfig
from .errors import PreconditionError


def make_server(config: SiteConfig, host: str = "") -> ThreadingHTTPServer:
    if not config.output_dir.is_dir():
        raise PreconditionError(
            f"Missing {config.output_dir.as_posix()}/ directory. Did you run 'slate build'?",
            config.output_dir,
        )
    handler = partial(SimpleHTTPRequestHandler, directory=str(config.output_dir))
    return ThreadingHTTPServer((host, config.port), handler)


def serve(config: Optional[SiteConfig] = None) -> None:
    config = config or SiteConfig()
    httpd = make_server(config)
    print(f"Serving {config.output_dir.as_posix()}/ at http://localhost:{config.port}")
    print("Press Ctrl+C to stop")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print("\nShutting down server...")
    finally:
        httpd.server_close()
