import time
from pathlib import Path
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.templating import Jinja2Templates
from mic_upload.config import Settings, get_settings
from mic_upload.services.plot_runner import PlotRunner
from mic_upload.utils.identifiers import Clock

TEMPLATES = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Setup middleware for the FastAPI application"""
    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_credentials,
        allow_methods=settings.cors_methods,
        allow_headers=settings.cors_headers,
    )

def get_clock() -> Clock:
    """Wall clock used to derive sample identifiers"""
    return time.time

def get_plot_runner(settings: Settings = Depends(get_settings)) -> PlotRunner:
    """Get a plot runner bound to the current settings"""
    return PlotRunner(settings)
