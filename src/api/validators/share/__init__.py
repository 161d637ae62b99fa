"""Validators de share — heurística de URL e mime types da coleção."""

from .mime import has_mime_type, mime_type_matches
from .url import is_valid_url

__all__ = [
    "has_mime_type",
    "is_valid_url",
    "mime_type_matches",
]
