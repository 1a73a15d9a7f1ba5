from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from staticblog.errors import ServeError
from staticblog.lib.log import get_logger
from staticblog.version import STATICBLOG_VERSION

logger = get_logger(__name__)


def check_directory(directory: Path) -> Path:
    """Return ``directory`` if it can be served, else raise ServeError."""
    if not directory.exists():
        raise ServeError(f"Directory {directory} does not exist")
    if not directory.is_dir():
        raise ServeError(f"{directory} is not a directory")
    return directory


def create_app(directory: Path) -> FastAPI:
    """Build an app serving ``directory`` as plain static files.

    ``html=True`` makes ``/`` and other directory paths resolve to their
    ``index.html``. Content types and byte ranges come from StaticFiles.
    """
    check_directory(directory)
    app = FastAPI(
        title="staticblog",
        version=STATICBLOG_VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.mount("/", StaticFiles(directory=str(directory), html=True), name="site")
    return app


def serve(directory: Path, host: str, port: int) -> None:
    """Serve ``directory`` until the process is stopped.

    Raises:
        ServeError: the directory is missing or uvicorn is not installed
    """
    try:
        import uvicorn
    except ImportError as exc:
        raise ServeError("uvicorn not installed") from exc

    app = create_app(directory)
    logger.info("Listening", url=f"http://{host}:{port}", directory=str(directory))
    # uvicorn exits the process itself if the port cannot be bound
    uvicorn.run(app, host=host, port=port, log_level="info")


__all__ = ["create_app", "check_directory", "serve"]
