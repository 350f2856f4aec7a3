"""Configuration models."""

from docbridge.config.settings import DEFAULT_INDEX_NAME, ObservabilitySettings, Settings, TransportSettings

__all__ = ["DEFAULT_INDEX_NAME", "ObservabilitySettings", "Settings", "TransportSettings"]
