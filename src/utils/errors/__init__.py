"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    InvalidSharePayloadError,
    ResourceResolutionError,
)

__all__ = [
    "InfrastructureError",
    "InvalidSharePayloadError",
    "ResourceResolutionError",
]
