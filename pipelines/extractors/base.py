"""
Base Extractor

Common scaffolding for components that pull raw records into a pipeline.
"""

from abc import ABC, abstractmethod
from typing import Any

from core.logging import get_logger


class BaseExtractor(ABC):
    """Gives every extractor a logger bound to its source name."""

    def __init__(self, source: str):
        self.source = source
        self.log = get_logger("extractor").bind(source=source)

    @abstractmethod
    def extract(self, **kwargs: Any) -> Any:
        """Fetch raw data from the source."""
        pass
