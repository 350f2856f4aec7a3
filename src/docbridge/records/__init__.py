"""Record capability the bridge is generic over."""

from docbridge.records.searchable import Searchable

__all__ = ["Searchable"]
