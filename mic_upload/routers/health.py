import shutil
from fastapi import APIRouter, Depends
from datetime import datetime
from mic_upload.config import Settings, get_settings
from mic_upload.storage.memory_storage import SampleRegistry, get_registry

router = APIRouter()

@router.get("/health")
async def health_check(
    settings: Settings = Depends(get_settings),
    registry: SampleRegistry = Depends(get_registry),
):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(),
        "rscript_available": shutil.which(settings.rscript_executable) is not None,
        "plot_script_present": settings.script_path.exists(),
        "storage_items": registry.get_storage_stats()
    }
