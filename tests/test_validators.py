import io
import pytest
from fastapi import UploadFile
from mic_upload.core.exceptions import FieldValidationError
from mic_upload.models.experiment import ExperimentFields
from mic_upload.utils.validators import check_transfer, sanitize_filename, validate_experiment_fields

@pytest.mark.parametrize("value", ["E.coli", "P. aeruginosa PAO1", "10 µg/mL", "LL-37", "24h", "", "CAMHB (pH 7.3)"])
def test_accepts_lab_names(value):
    validate_experiment_fields(ExperimentFields(bacteria=value))

@pytest.mark.parametrize("value", ["$(whoami)", "a`id`", "x > /etc/passwd", "name\nsecond", "a|b", "-e"])
def test_rejects_unsafe_values(value):
    with pytest.raises(FieldValidationError):
        validate_experiment_fields(ExperimentFields(medium=value))

def test_rejects_long_values():
    with pytest.raises(FieldValidationError) as exc_info:
        validate_experiment_fields(ExperimentFields(assay="x" * 11), max_length=10)

    assert "Assay_Name" in exc_info.value.message
    assert exc_info.value.status_code == 400

def test_check_transfer_missing_file():
    assert check_transfer(None, 100) == "Error transfer: no file was received"

def test_check_transfer_empty_filename():
    upload = UploadFile(file=io.BytesIO(b""), filename="")

    assert check_transfer(upload, 100) == "Error transfer: no file was selected"

def test_check_transfer_size_limit():
    upload = UploadFile(file=io.BytesIO(b"0123456789"), filename="plate.csv")

    assert check_transfer(upload, 100) is None
    assert "maximum size of 5 bytes" in check_transfer(upload, 5)
    assert upload.file.tell() == 0

def test_sanitize_filename():
    assert sanitize_filename("../../etc/plate 1.csv") == "plate_1.csv"
    assert sanitize_filename("plate#1?.csv") == "plate_1_.csv"
    assert len(sanitize_filename("a" * 150 + ".csv")) == 99
