"""Connector de share — parse do payload entregue pelo host."""

from .payload import (
    ClipItemPayload,
    ShareEventPayload,
    parse_share_payload,
)

__all__ = [
    "ClipItemPayload",
    "ShareEventPayload",
    "parse_share_payload",
]
