from fastapi import APIRouter, Depends
from mic_upload.config import Settings, get_settings
from mic_upload.core.exceptions import SampleNotFoundError
from mic_upload.storage.memory_storage import SampleRegistry, get_registry
from mic_upload.storage.sample_storage import SampleStorage

router = APIRouter()

@router.get("/")
async def list_samples(registry: SampleRegistry = Depends(get_registry)):
    """List all handled samples"""
    result = []
    for record in registry.list_samples():
        result.append({
            "identifier": record.identifier,
            "fileName": record.sample.fileName if record.sample else None,
            "url": record.sample.url if record.sample else None,
            "plotSrc": record.plot.src,
            "plotStatus": record.plot.status,
            "createdAt": record.createdAt
        })

    return result

@router.get("/{identifier}")
async def get_sample(
    identifier: str,
    registry: SampleRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    """Get a handled sample by identifier"""
    record = registry.get_sample(identifier)
    if not record:
        raise SampleNotFoundError(f"Sample {identifier} not found")

    storage = SampleStorage(settings)
    return {
        **record.model_dump(),
        "dataExists": storage.data_path(identifier).exists(),
        "plotExists": storage.plot_path(identifier).exists()
    }
