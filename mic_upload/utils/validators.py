import os
import re
from fastapi import UploadFile
from typing import Optional
from mic_upload.core.exceptions import FieldValidationError
from mic_upload.models.experiment import ExperimentFields, FORM_FIELDS

# Word characters plus the punctuation lab names use (E.coli, 10 ug/mL, 24h, ...)
FIELD_PATTERN = re.compile(r'[\w .,:;+/()%\-]*')

def validate_experiment_fields(fields: ExperimentFields, max_length: int = 100) -> None:
    """Validate experiment field contents before they reach the plot script"""
    for name, value in fields.model_dump().items():
        form_name = FORM_FIELDS[name]

        if len(value) > max_length:
            raise FieldValidationError(f"{form_name} must be at most {max_length} characters")

        if value.startswith('-'):
            raise FieldValidationError(f"{form_name} must not start with '-'")

        if not FIELD_PATTERN.fullmatch(value):
            raise FieldValidationError(
                f"{form_name} contains unsupported characters. "
                f"Allowed: letters, digits, spaces and . , : ; + / ( ) % -"
            )

def get_upload_size(file: UploadFile) -> int:
    """Size of the spooled upload in bytes"""
    if file.size is not None:
        return file.size

    position = file.file.tell()
    file.file.seek(0, os.SEEK_END)
    size = file.file.tell()
    file.file.seek(position)
    return size

def check_transfer(file: Optional[UploadFile], max_size: int) -> Optional[str]:
    """Return a transfer error message for the uploaded file part, or None"""
    if file is None:
        return "Error transfer: no file was received"

    if not file.filename:
        return "Error transfer: no file was selected"

    size = get_upload_size(file)
    if size > max_size:
        return f"Error transfer: file exceeds the maximum size of {max_size} bytes"

    return None

def sanitize_filename(filename: str) -> str:
    """Sanitize filename for display"""
    # Remove or replace unsafe characters
    filename = re.sub(r'[^\w\-_\.]', '_', os.path.basename(filename))

    # Limit length
    if len(filename) > 100:
        name, ext = filename.rsplit('.', 1) if '.' in filename else (filename, '')
        filename = name[:95] + ('.' + ext if ext else '')

    return filename
