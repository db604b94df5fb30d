# DriveDesk backend entrypoint: driving school scheduling and billing API.

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from drivedesk.app.api import instructors, invoices, lessons, login
from drivedesk.app.core.errors import register_error_handlers
from drivedesk.app.core.exceptions import NotFound
from drivedesk.app.core.logging_config import configure_logging
from drivedesk.app.core.settings import get_settings
from drivedesk.app.db.session import init_db

configure_logging()
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("%s started (environment: %s)", settings.app_name, settings.environment)
    yield


app = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(login.router)
app.include_router(instructors.router)
app.include_router(lessons.router)
app.include_router(invoices.router)


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/{full_path:path}", include_in_schema=False)
def serve_frontend(full_path: str):
    """Serve files from the static directory, falling back to index.html."""
    if full_path == "api" or full_path.startswith("api/"):
        raise NotFound()
    static_root = Path(settings.static_dir).resolve()
    candidate = (static_root / full_path).resolve()
    if full_path and candidate.is_file() and candidate.is_relative_to(static_root):
        return FileResponse(candidate)
    index = static_root / "index.html"
    if not index.is_file():
        raise NotFound()
    return FileResponse(index)


def run() -> None:
    port = int(os.getenv("PORT", "4000"))
    uvicorn.run("drivedesk.app.main:app", host="0.0.0.0", port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
