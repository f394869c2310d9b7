"""FastAPI application serving commit data to the browser page."""

from pathlib import Path

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse, HTMLResponse

from api.page import INDEX_HTML
from common.env import env
from common.logger import get_logger

logger = get_logger(__name__)


def create_app(data_path: Path) -> FastAPI:
    """
    Build the application for one commit data document.

    Args:
        data_path: Location of commits-data.json; read on every request

    Returns:
        FastAPI application
    """
    data_path = Path(data_path)

    app = FastAPI(
        title="rush",
        description="Commit history served to the browser",
        version="0.1.0",
    )

    @app.get("/", response_class=HTMLResponse)
    @app.get("/index.html", response_class=HTMLResponse)
    async def index():
        """Browser page."""
        return HTMLResponse(INDEX_HTML)

    @app.get("/commits-data.json")
    async def commits_data():
        """The commit data document, never cached."""
        if not data_path.is_file():
            raise HTTPException(status_code=404, detail="Commit data not found")
        return FileResponse(
            data_path,
            media_type="application/json",
            headers={"Cache-Control": "no-cache"},
        )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


def serve(data_path: Path, host: str | None = None, port: int | None = None) -> None:
    """
    Serve the commit data until interrupted.

    Args:
        data_path: Location of commits-data.json
        host: Interface to bind (default: RUSH_HOST)
        port: Port to bind (default: RUSH_PORT)
    """
    host = host or env.host()
    port = port or env.port()
    logger.debug(f"Serving {data_path} on {host}:{port}")
    uvicorn.run(create_app(data_path), host=host, port=port, log_level="warning")


app = create_app(env.output_path())
