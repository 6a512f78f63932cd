"""Static asset server with a liveness endpoint and port retry on conflict."""

from __future__ import annotations

import argparse
import errno
import logging
import socket
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .config import SERVER_CONFIG

logger = logging.getLogger("swingalyze")


def create_app(root_dir: str | Path) -> FastAPI:
    """FastAPI app serving root_dir at / plus GET /healthz."""
    app = FastAPI(title="swingalyze", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    # Mounted last so /healthz wins over the catch-all static mount
    app.mount("/", StaticFiles(directory=str(root_dir), html=True), name="static")
    return app


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Bind host:port, moving to port + 1 while the port is in use.

    Any bind error other than EADDRINUSE propagates.
    """
    while True:
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((host, port))
        except OSError as exc:
            sock.close()
            if exc.errno == errno.EADDRINUSE:
                logger.info("[swingalyze] port %s in use; trying %s…", port, port + 1)
                port += 1
                continue
            raise
        sock.set_inheritable(True)
        return sock


def serve(root_dir: str | Path, host: str = "0.0.0.0", port: int = 3000) -> None:
    try:
        sock = bind_socket(host, port)
    except OSError as exc:
        logger.error("[swingalyze] failed to bind %s:%s: %s", host, port, exc)
        sys.exit(1)

    active_port = sock.getsockname()[1]
    logger.info("[swingalyze] listening on http://localhost:%s", active_port)

    config = uvicorn.Config(create_app(root_dir), log_level="info")
    server = uvicorn.Server(config)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Swingalyze - static asset server")
    parser.add_argument("--root", default=SERVER_CONFIG["root"], help="Directory to serve")
    parser.add_argument("--host", default=SERVER_CONFIG["host"], help="Bind address")
    parser.add_argument("--port", type=int, default=SERVER_CONFIG["port"],
                        help="Starting port (next free port is used on conflict)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    root = Path(args.root)
    if not root.is_dir():
        logger.error("[swingalyze] root directory not found: %s", root)
        sys.exit(1)
    serve(root, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
