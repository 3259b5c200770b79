from enum import Enum
from pydantic import BaseModel
from datetime import datetime
from typing import List, Optional
from mic_upload.models.experiment import ExperimentFields

class PlotStatus(str, Enum):
    not_run = "not_run"
    completed = "completed"
    failed = "failed"
    timed_out = "timed_out"
    error = "error"

class PlotRunResult(BaseModel):
    command: List[str]
    returnCode: Optional[int] = None
    stderr: str = ""
    timedOut: bool = False
    error: Optional[str] = None
    elapsedSeconds: float = 0.0

    @property
    def status(self) -> PlotStatus:
        if self.error:
            return PlotStatus.error
        if self.timedOut:
            return PlotStatus.timed_out
        if self.returnCode == 0:
            return PlotStatus.completed
        return PlotStatus.failed

class DataSummary(BaseModel):
    rowCount: int
    columns: List[str]

class StoredSample(BaseModel):
    identifier: str
    fileName: str
    url: str
    originalName: Optional[str] = None
    contentType: Optional[str] = None
    size: Optional[int] = None
    uploadedAt: datetime

class GeneratedPlot(BaseModel):
    identifier: str
    fileName: str
    src: str
    status: PlotStatus = PlotStatus.not_run

class SampleRecord(BaseModel):
    identifier: str
    experiment: ExperimentFields
    sample: Optional[StoredSample] = None
    plot: GeneratedPlot
    summary: Optional[DataSummary] = None
    createdAt: datetime

class UploadOutcome(BaseModel):
    identifier: str
    dataFileName: str
    stored: bool
    sample: Optional[StoredSample] = None
    plot: GeneratedPlot
    run: PlotRunResult
    summary: Optional[DataSummary] = None
    transferError: Optional[str] = None
    notices: List[str] = []
