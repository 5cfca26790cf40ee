"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

import os

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from videobelajar.api import router as api_router
from videobelajar.core.config import settings
from videobelajar.core.errors import register_exception_handlers
from videobelajar.core.logging_config import configure_logging

configure_logging()

app = FastAPI(
    title="VideoBelajar API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)

os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount("/upload", StaticFiles(directory=settings.UPLOAD_DIR), name="upload")


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "VideoBelajar API"}
