import logging
from pathlib import Path
from typing import Optional
import pandas as pd
from mic_upload.models.sample import DataSummary

logger = logging.getLogger(__name__)

def summarize_csv(path: Path) -> Optional[DataSummary]:
    """Row count and column names of a stored CSV, or None if it does not parse"""
    try:
        frame = pd.read_csv(path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, OSError) as e:
        logger.warning(f"Could not summarize {path.name}: {e}")
        return None

    return DataSummary(
        rowCount=len(frame.index),
        columns=[str(column) for column in frame.columns]
    )
