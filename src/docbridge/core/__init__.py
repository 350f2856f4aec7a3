"""Core bridge components."""

from docbridge.core.bridge import SearchBridge
from docbridge.core.hydrator import Hydrator
from docbridge.core.mapper import DocumentMapper
from docbridge.core.query import QueryExecutor
from docbridge.core.schema import IndexManager
from docbridge.core.sync import DocumentSync

__all__ = ["DocumentMapper", "DocumentSync", "Hydrator", "IndexManager", "QueryExecutor", "SearchBridge"]
