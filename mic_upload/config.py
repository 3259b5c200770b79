import os
from functools import lru_cache
from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

class Settings(BaseSettings):
    """Application settings"""

    # Filesystem layout, relative to the app root
    app_root: Path = Path(os.getcwd())
    data_dir: str = "mic-data"
    output_dir: str = "mic-output"

    # Plotting collaborator
    rscript_executable: str = "Rscript"
    plot_script: str = "R-scripts/mic.R"
    plot_timeout_seconds: float = 120.0

    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    log_level: str = "INFO"

    # CORS configuration
    cors_origins: list = ["*"]
    cors_credentials: bool = True
    cors_methods: list = ["*"]
    cors_headers: list = ["*"]

    # Application settings
    max_upload_size: int = 10 * 1024 * 1024  # 10MB
    max_field_length: int = 100
    unique_identifiers: bool = False
    max_samples: int = 1000
    summarize_uploads: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "MIC_"

    @property
    def data_path(self) -> Path:
        return self.app_root / self.data_dir

    @property
    def output_path(self) -> Path:
        return self.app_root / self.output_dir

    @property
    def script_path(self) -> Path:
        return self.app_root / self.plot_script

    def validate_paths(self) -> bool:
        """Validate that the data and output directories are distinct"""
        return bool(self.data_dir and self.output_dir and self.data_dir != self.output_dir)

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    settings = Settings()

    # Validate required configurations
    if not settings.validate_paths():
        raise ValueError("MIC_DATA_DIR and MIC_OUTPUT_DIR must be set and must differ")

    return settings
