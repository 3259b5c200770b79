from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger(__name__)

class MicUploadException(Exception):
    """Base exception for the MIC upload application"""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class FieldValidationError(MicUploadException):
    """Exception raised when an experiment field fails the allowlist"""
    def __init__(self, message: str):
        super().__init__(message, 400)

class SampleNotFoundError(MicUploadException):
    """Exception raised when a stored sample is not found"""
    def __init__(self, message: str = "Sample not found"):
        super().__init__(message, 404)

class PlotExecutionError(MicUploadException):
    """Exception raised when the plotting collaborator cannot be started"""
    def __init__(self, message: str):
        super().__init__(message, 500)

async def mic_upload_exception_handler(request: Request, exc: MicUploadException):
    """Handle application exceptions"""
    logger.error(f"MicUpload Exception: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "type": exc.__class__.__name__}
    )

async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions"""
    logger.error(f"HTTP Exception: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )

async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

def setup_exception_handlers(app: FastAPI):
    """Setup exception handlers for the FastAPI app"""
    app.add_exception_handler(MicUploadException, mic_upload_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
