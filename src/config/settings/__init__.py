"""Agregador de settings do normalizer de share.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.share import (
    DEFAULT_MAX_CONTENT_BYTES,
    ShareSettings,
    get_share_settings,
)

__all__ = [
    "DEFAULT_MAX_CONTENT_BYTES",
    "BaseSettings",
    "Environment",
    "ShareSettings",
    "get_base_settings",
    "get_share_settings",
]
