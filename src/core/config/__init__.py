"""Configuration schemas for the plugin."""

from .schemas import (
    FreestreamConfig,
    ReferenceConfig,
    FilesConfig,
    UDFConfig,
)

__all__ = [
    "FreestreamConfig",
    "ReferenceConfig",
    "FilesConfig",
    "UDFConfig",
]
