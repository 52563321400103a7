"""FastAPI static file server.

Serves files from a root directory and exposes one configuration value
at /api/config-key.

Run via: python -m housedigest.server.app
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..config import Settings

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request."""

    async def dispatch(self, request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)


def resolve_static_path(root: Path, url_path: str) -> Optional[Path]:
    """Map a URL path to a file under root.

    Returns None when the path escapes the root.
    """
    relative = url_path.lstrip("/") or INDEX_FILE
    root = root.resolve()
    target = (root / relative).resolve()
    if target != root and root not in target.parents:
        return None
    return target


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the static file server app."""
    settings = settings or Settings()
    root = Path(settings.server_root)

    app = FastAPI(
        title="HouseDigest static server",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/api/config-key")
    async def config_key() -> dict:
        return {"key": settings.config_key}

    @app.get("/{path:path}")
    def static_file(path: str) -> Response:
        target = resolve_static_path(root, path)
        if target is None:
            return PlainTextResponse("Not found", status_code=404)

        try:
            content = target.read_bytes()
        except FileNotFoundError:
            return PlainTextResponse("Not found", status_code=404)
        except OSError as e:
            logger.error(f"Failed to read {target}: {e}")
            return PlainTextResponse("Server error", status_code=500)

        media_type = MIME_TYPES.get(target.suffix.lower(), DEFAULT_MIME_TYPE)
        return Response(content=content, media_type=media_type)

    return app


def main() -> None:
    """Serve the configured root with uvicorn."""
    import uvicorn

    from ..runner import setup_logging

    setup_logging()
    settings = Settings()
    logger.info(f"Serving files from {Path(settings.server_root).resolve()}")
    uvicorn.run(create_app(settings), host=settings.server_host, port=settings.server_port)


if __name__ == "__main__":
    main()
