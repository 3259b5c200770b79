import logging
import os
import shutil
import tempfile
from pathlib import Path
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool
from mic_upload.config import Settings

logger = logging.getLogger(__name__)

class SampleStorage:
    """Filesystem layout for stored samples and generated plots"""

    def __init__(self, settings: Settings):
        self.settings = settings

    def ensure_directories(self) -> None:
        """Create the data and output directories if missing"""
        self.settings.data_path.mkdir(parents=True, exist_ok=True)
        self.settings.output_path.mkdir(parents=True, exist_ok=True)

    # Stored data file
    def data_filename(self, identifier: str) -> str:
        return f"{identifier}-data.csv"

    def data_path(self, identifier: str) -> Path:
        return self.settings.data_path / self.data_filename(identifier)

    def data_url(self, identifier: str) -> str:
        return f"/{self.settings.data_dir}/{self.data_filename(identifier)}"

    # Generated plot
    def plot_filename(self, identifier: str) -> str:
        return f"mic-plot-{identifier}.png"

    def plot_path(self, identifier: str) -> Path:
        return self.settings.output_path / self.plot_filename(identifier)

    def plot_src(self, identifier: str) -> str:
        return f"./{self.settings.output_dir}/{self.plot_filename(identifier)}"

    async def move_upload(self, file: UploadFile, destination: Path) -> bool:
        """Move the spooled upload to its destination. Returns success."""
        try:
            await run_in_threadpool(self._copy_upload, file, destination)
        except OSError as e:
            logger.error(f"Could not store upload at {destination}: {e}")
            return False

        logger.info(f"Stored upload {file.filename!r} at {destination}")
    @staticmethod
    def _copy_upload(file: UploadFile, destination: Path) -> None:
        # Written beside the destination, then renamed over it
        file.file.seek(0)
        with tempfile.NamedTemporaryFile(dir=destination.parent, prefix=".upload-", delete=False) as target:
            temp_path = target.name
            try:
                shutil.copyfileobj(file.file, target)
            except OSError:
                target.close()
                os.unlink(temp_path)
                raise
        try:
            os.replace(temp_path, destination)
        except OSError:
            os.unlink(temp_path)
            raise
