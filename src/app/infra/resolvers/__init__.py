"""Resolvers de recursos compartilhados."""

from .local import IndexedResource, LocalResourceResolver

__all__ = [
    "IndexedResource",
    "LocalResourceResolver",
]
