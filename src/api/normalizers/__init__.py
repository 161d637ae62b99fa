"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- share/: normalizer de eventos de share (clip data, extras, data)
"""

from .share import ShareNormalizer, normalize_share_event

__all__ = [
    "ShareNormalizer",
    "normalize_share_event",
]
