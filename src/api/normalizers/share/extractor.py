"""Extratores de itens do evento de share.

Três caminhos, tentados em ordem pelo normalizer até um produzir itens:
1. clip data (coleção multi-item)
2. extra de stream (referência única nos extras)
3. data (referência "view" do evento)

Não faz validação de negócio - apenas extração estrutural.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.validators.share import has_mime_type, is_valid_url
from app.constants.share import MIME_TEXT_PLAIN, MIME_URI_LIST, ExtraKey

from ._extraction_helpers import first_item, item_from_resource, item_from_text

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import ClipItem, ResourceItem, ShareEvent, ShareItem
    from app.protocols.resource_resolver import ResourceResolverProtocol

logger = logging.getLogger(__name__)


def _extract_clip_item(
    resolver: ResourceResolverProtocol,
    event: ShareEvent,
    clip_item: ClipItem,
    declared: frozenset[str],
) -> ShareItem | None:
    # A declaração de mime types é da coleção, não do item.
    if has_mime_type(declared, MIME_URI_LIST):
        return item_from_text(event.extras)
    if has_mime_type(declared, MIME_TEXT_PLAIN) and is_valid_url(clip_item.text):
        text_item = item_from_text(event.extras)
        if text_item is not None:
            return text_item
    return first_item(
        lambda: item_from_resource(resolver, clip_item.uri),
        lambda: item_from_resource(resolver, event.data),
    )


def extract_from_clips(
    resolver: ResourceResolverProtocol,
    event: ShareEvent,
) -> list[ShareItem]:
    """Extrai um item por entrada de clip, preservando a ordem.

    Posições que não produzem item são omitidas (sequência compactada).
    """
    if event.clip_items is None:
        return []
    declared = event.clip_mime_types
    items: list[ShareItem] = []
    for index, clip_item in enumerate(event.clip_items):
        item = _extract_clip_item(resolver, event, clip_item, declared)
        if item is None:
            logger.debug("share_clip_item_unresolved", extra={"clip_index": index})
            continue
        items.append(item)
    return items


def extract_from_extras_stream(
    resolver: ResourceResolverProtocol,
    extras: Mapping[str, Any] | None,
) -> ResourceItem | None:
    """Extrai o item referenciado pelo extra de stream."""
    if not extras:
        return None
    stream = extras.get(ExtraKey.STREAM)
    if stream is not None and not isinstance(stream, str):
        logger.debug(
            "share_stream_extra_ignored",
            extra={"value_type": type(stream).__name__},
        )
        return None
    return item_from_resource(resolver, stream)


def extract_from_data(
    resolver: ResourceResolverProtocol,
    uri: str | None,
) -> ResourceItem | None:
    """Extrai o item da referência de dados do evento (ação VIEW)."""
    return item_from_resource(resolver, uri)
