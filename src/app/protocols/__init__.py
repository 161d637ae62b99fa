"""Protocolos e contratos do core da aplicação."""

from .models import (
    ClipItem,
    NormalizedShare,
    ResourceItem,
    ShareEvent,
    ShareItem,
    TextItem,
)
from .normalizer import ShareNormalizerProtocol
from .resource_resolver import ResourceResolverProtocol

__all__ = [
    "ClipItem",
    "NormalizedShare",
    "ResourceItem",
    "ResourceResolverProtocol",
    "ShareEvent",
    "ShareItem",
    "ShareNormalizerProtocol",
    "TextItem",
]
