"""
Data Extractors

Reusable components for reading raw fixture data.
"""

from pipelines.extractors.base import BaseExtractor
from pipelines.extractors.fixtures import FixtureExtractor

__all__ = [
    "BaseExtractor",
    "FixtureExtractor",
]
