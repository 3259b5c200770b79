from pydantic import BaseModel
from typing import Dict, List, Optional

# Form field names posted by the upload page, in the order they are read
FORM_FIELDS: Dict[str, str] = {
    "bacteria": "Bacteria_Name",
    "assay": "Assay_Name",
    "medium": "Medium_Name",
    "peptide1": "Peptide1_Name",
    "peptide2": "Peptide2_Name",
    "antibiotic": "Antibiotic_Name",
    "timePoint": "Time_Point",
    "concentration": "Con_Name",
}

# Positional order expected by mic.R after the identifier
SCRIPT_ARGUMENT_ORDER: List[str] = [
    "bacteria",
    "assay",
    "medium",
    "peptide1",
    "peptide2",
    "antibiotic",
    "concentration",
    "timePoint",
]

class ExperimentFields(BaseModel):
    bacteria: str = ""
    assay: str = ""
    medium: str = ""
    peptide1: str = ""
    peptide2: str = ""
    antibiotic: str = ""
    timePoint: str = ""
    concentration: str = ""

    def as_script_arguments(self) -> List[str]:
        """Field values in the collaborator's positional order"""
        return [getattr(self, name) for name in SCRIPT_ARGUMENT_ORDER]

class FileTransfer(BaseModel):
    fileName: Optional[str] = None
    contentType: Optional[str] = None
    size: Optional[int] = None
    error: Optional[str] = None

class UploadRequest(BaseModel):
    transfer: FileTransfer
    experiment: ExperimentFields
