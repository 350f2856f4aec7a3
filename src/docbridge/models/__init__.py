"""Data models shared across the bridge."""

from docbridge.models.document import IndexLocator, SearchHitMetadata
from docbridge.models.result import ResultSet

__all__ = ["IndexLocator", "ResultSet", "SearchHitMetadata"]
