"""Heurística de URL aplicada ao texto de itens de clip."""

from __future__ import annotations

from app.constants.share import VALID_URL_PREFIXES


def is_valid_url(text: object) -> bool:
    """Retorna True se o texto começa com um esquema aceito pela plataforma.

    Não valida a URL por completo: apenas o prefixo, sem diferenciar
    maiúsculas de minúsculas (ex: "HTTP://x" é aceito, "www.x.com" não).
    """
    if not isinstance(text, str) or not text:
        return False
    lowered = text.lower()
    return any(lowered.startswith(prefix) for prefix in VALID_URL_PREFIXES)
