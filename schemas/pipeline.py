from pydantic import BaseModel, ConfigDict
from typing import Optional

from .common import ApiStatus


class PipelineResult(BaseModel):
    """Result of a single pipeline execution"""

    status: ApiStatus
    message: str
    started_at: str
    completed_at: Optional[str] = None
    duration_seconds: Optional[float] = None
    records_processed: Optional[int] = None
    skipped: bool = False
    error: Optional[str] = None

    model_config = ConfigDict(use_enum_values=True)
