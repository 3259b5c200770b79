import logging
from pathlib import Path
from typing import Optional
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from mic_upload.config import Settings, get_settings
from mic_upload.core.exceptions import setup_exception_handlers
from mic_upload.dependencies import setup_middleware
from mic_upload.routers import health, samples, upload
from mic_upload.storage.sample_storage import SampleStorage

STATIC_DIR = Path(__file__).resolve().parent / "static"

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    app = FastAPI(
        title="MIC Upload",
        version="1.0.0",
        description="Upload MIC assay data and plot it with mic.R"
    )
    app.dependency_overrides[get_settings] = lambda: settings

    setup_middleware(app, settings)
    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(upload.router, tags=["upload"])
    app.include_router(samples.router, prefix="/samples", tags=["samples"])

    SampleStorage(settings).ensure_directories()
    app.mount(f"/{settings.data_dir}", StaticFiles(directory=str(settings.data_path)), name="mic-data")
    app.mount(f"/{settings.output_dir}", StaticFiles(directory=str(settings.output_path)), name="mic-output")
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app

