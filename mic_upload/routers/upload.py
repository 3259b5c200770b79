from typing import Optional
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse
from mic_upload.config import Settings, get_settings
from mic_upload.dependencies import TEMPLATES, get_clock, get_plot_runner
from mic_upload.models.experiment import ExperimentFields
from mic_upload.services.plot_runner import PlotRunner
from mic_upload.services.upload_service import process_upload
from mic_upload.storage.memory_storage import SampleRegistry, get_registry
from mic_upload.utils.identifiers import Clock
from mic_upload.utils.validators import sanitize_filename

router = APIRouter()

@router.get("/", response_class=HTMLResponse)
@router.get("/mic_upload", response_class=HTMLResponse)
async def upload_form(request: Request):
    """Upload form for MIC experiment data"""
    return TEMPLATES.TemplateResponse(request, "upload_form.html")

@router.post("/mic_upload_process", response_class=HTMLResponse)
async def upload_and_render(
    request: Request,
    upload_file: Optional[UploadFile] = File(None),
    bacteria: str = Form("", alias="Bacteria_Name"),
    assay: str = Form("", alias="Assay_Name"),
    medium: str = Form("", alias="Medium_Name"),
    peptide1: str = Form("", alias="Peptide1_Name"),
    peptide2: str = Form("", alias="Peptide2_Name"),
    antibiotic: str = Form("", alias="Antibiotic_Name"),
    time_point: str = Form("", alias="Time_Point"),
    concentration: str = Form("", alias="Con_Name"),
    settings: Settings = Depends(get_settings),
    runner: PlotRunner = Depends(get_plot_runner),
    registry: SampleRegistry = Depends(get_registry),
    clock: Clock = Depends(get_clock),
):
    """Store an uploaded MIC data file, plot it and render the result page"""
    fields = ExperimentFields(
        bacteria=bacteria,
        assay=assay,
        medium=medium,
        peptide1=peptide1,
        peptide2=peptide2,
        antibiotic=antibiotic,
        timePoint=time_point,
        concentration=concentration
    )

    try:
        outcome = await process_upload(upload_file, fields, settings, runner, registry, clock)
    finally:
        if upload_file is not None:
            await upload_file.close()

    original_name = outcome.sample.originalName if outcome.sample else None
    return TEMPLATES.TemplateResponse(request, "upload_result.html", {
        "outcome": outcome,
        "original_name": sanitize_filename(original_name) if original_name else None,
    })
