"""Leitura do conteúdo bruto de itens para consumidores que precisam dos bytes.

Fora do caminho de normalização: o normalizer nunca lê conteúdo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.models import ResourceItem

if TYPE_CHECKING:
    from app.protocols.models import NormalizedShare, ShareItem
    from app.protocols.resource_resolver import ResourceResolverProtocol

logger = logging.getLogger(__name__)


def read_item_content(resolver: ResourceResolverProtocol, item: ShareItem) -> str:
    """Retorna o conteúdo do item em Base64; string vazia se indisponível."""
    if not isinstance(item, ResourceItem):
        return ""
    try:
        return resolver.read_bytes_base64(item.uri) or ""
    except Exception as exc:
        logger.warning(
            "share_content_read_failed",
            extra={"error_type": type(exc).__name__},
        )
        return ""


def serialize_share_with_content(
    record: NormalizedShare,
    resolver: ResourceResolverProtocol,
) -> dict[str, Any]:
    """Serializa o registro incluindo `data` (Base64) nos itens de recurso."""
    payload = record.to_dict()
    for item, item_payload in zip(record.items, payload["items"], strict=True):
        if isinstance(item, ResourceItem):
            item_payload["data"] = read_item_content(resolver, item)
    return payload
