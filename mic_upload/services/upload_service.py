import logging
from datetime import datetime
from typing import Optional
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool
from mic_upload.config import Settings
from mic_upload.models.experiment import ExperimentFields, FileTransfer, UploadRequest
from mic_upload.models.sample import GeneratedPlot, SampleRecord, StoredSample, UploadOutcome
from mic_upload.services.plot_runner import PlotRunner, describe_failure
from mic_upload.storage.memory_storage import SampleRegistry
from mic_upload.storage.sample_storage import SampleStorage
from mic_upload.utils.identifiers import Clock, make_identifier
from mic_upload.utils.parsers import summarize_csv
from mic_upload.utils.validators import check_transfer, get_upload_size, validate_experiment_fields

logger = logging.getLogger(__name__)

def read_upload_request(file: Optional[UploadFile], fields: ExperimentFields, settings: Settings) -> UploadRequest:
    """Collect transfer metadata for the file part alongside the form fields"""
    error = check_transfer(file, settings.max_upload_size)
    if error:
        logger.warning(error)

    transfer = FileTransfer(
        fileName=file.filename if file is not None else None,
        contentType=file.content_type if file is not None else None,
        size=get_upload_size(file) if file is not None else None,
        error=error
    )
    return UploadRequest(transfer=transfer, experiment=fields)

async def process_upload(
    file: Optional[UploadFile],
    fields: ExperimentFields,
    settings: Settings,
    runner: PlotRunner,
    registry: SampleRegistry,
    clock: Clock,
) -> UploadOutcome:
    """Store the uploaded sample, run the plot script and describe the result"""
    validate_experiment_fields(fields, settings.max_field_length)

    storage = SampleStorage(settings)
    storage.ensure_directories()

    request = read_upload_request(file, fields, settings)
    identifier = make_identifier(clock, unique=settings.unique_identifiers)
    destination = storage.data_path(identifier)

    stored = False
    if request.transfer.error is None:
        stored = await storage.move_upload(file, destination)

    sample = None
    summary = None
    if stored:
        sample = StoredSample(
            identifier=identifier,
            fileName=storage.data_filename(identifier),
            url=storage.data_url(identifier),
            originalName=request.transfer.fileName,
            contentType=request.transfer.contentType,
            size=request.transfer.size,
            uploadedAt=datetime.now()
        )
        if settings.summarize_uploads:
            summary = await run_in_threadpool(summarize_csv, destination)

    # The plot script runs whether or not the file was stored
    run = await runner.run(identifier, fields)

    plot = GeneratedPlot(
        identifier=identifier,
        fileName=storage.plot_filename(identifier),
        src=storage.plot_src(identifier),
        status=run.status
    )

    notices = []
    failure = describe_failure(run)
    if failure:
        notices.append(failure)
    if not storage.plot_path(identifier).exists():
        logger.warning(f"Plot image {plot.fileName} was not produced")
        notices.append(f"The plot image {plot.fileName} was not produced.")

    registry.store_sample(identifier, SampleRecord(
        identifier=identifier,
        experiment=fields,
        sample=sample,
        plot=plot,
        summary=summary,
        createdAt=datetime.now()
    ), max_samples=settings.max_samples)

    return UploadOutcome(
        identifier=identifier,
        dataFileName=storage.data_filename(identifier),
        stored=stored,
        sample=sample,
        plot=plot,
        run=run,
        summary=summary,
        transferError=request.transfer.error,
        notices=notices
    )
