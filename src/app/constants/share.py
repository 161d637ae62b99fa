"""Constantes do protocolo de compartilhamento (share intents)."""

from __future__ import annotations

from enum import StrEnum


class PlatformAction(StrEnum):
    """Ações brutas entregues pelo host junto com o evento de share."""

    SEND = "android.intent.action.SEND"
    SEND_MULTIPLE = "android.intent.action.SEND_MULTIPLE"
    VIEW = "android.intent.action.VIEW"


class ShareAction(StrEnum):
    """Ações lógicas expostas no registro normalizado."""

    SEND = "SEND"
    VIEW = "VIEW"


class ExtraKey(StrEnum):
    """Chaves conhecidas do bundle de extras."""

    TEXT = "android.intent.extra.TEXT"
    SUBJECT = "android.intent.extra.SUBJECT"
    STREAM = "android.intent.extra.STREAM"


class ItemSource(StrEnum):
    """Extrator que produziu os itens do registro (apenas observabilidade)."""

    CLIP_DATA = "clip_data"
    EXTRAS_STREAM = "extras_stream"
    DATA = "data"
    NONE = "none"


DEFAULT_EXIT_FLAG_KEY = "exit_on_sent"

MIME_URI_LIST = "text/uri-list"
MIME_TEXT_PLAIN = "text/plain"

# Prefixos aceitos pela heurística de URL da plataforma (comparação case-insensitive)
VALID_URL_PREFIXES: tuple[str, ...] = (
    "file:///android_asset/",
    "file:///android_res/",
    "file://",
    "about:",
    "http://",
    "https://",
    "javascript:",
    "content:",
)
