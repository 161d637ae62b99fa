"""Normalizer de share — orquestra extratores e monta o registro final.

Ordem de fallback (curto-circuito, sem merge):
clip data → extra de stream → data. O primeiro extrator que produzir
itens define `items`; os seguintes não são consultados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.share import parse_share_payload
from app.constants.share import DEFAULT_EXIT_FLAG_KEY, ItemSource
from app.observability import correlation_scope
from app.protocols.models import NormalizedShare
from config.logging import log_fallback

from .actions import read_exit_on_sent, translate_action
from .extractor import extract_from_clips, extract_from_data, extract_from_extras_stream

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import ShareEvent, ShareItem
    from app.protocols.resource_resolver import ResourceResolverProtocol
    from config.settings import ShareSettings

logger = logging.getLogger(__name__)


def _extract_items(
    resolver: ResourceResolverProtocol,
    event: ShareEvent,
) -> tuple[list[ShareItem], ItemSource]:
    items = extract_from_clips(resolver, event)
    if items:
        return items, ItemSource.CLIP_DATA

    stream_item = extract_from_extras_stream(resolver, event.extras)
    if stream_item is not None:
        log_fallback(logger, "share_extractor", reason="clip_data_empty", source=ItemSource.EXTRAS_STREAM)
        return [stream_item], ItemSource.EXTRAS_STREAM

    data_item = extract_from_data(resolver, event.data)
    if data_item is not None:
        log_fallback(logger, "share_extractor", reason="extras_stream_empty", source=ItemSource.DATA)
        return [data_item], ItemSource.DATA

    return [], ItemSource.NONE


def normalize_share_event(
    resolver: ResourceResolverProtocol,
    event: ShareEvent,
    *,
    exit_flag_key: str = DEFAULT_EXIT_FLAG_KEY,
) -> NormalizedShare:
    """Normaliza um ShareEvent em NormalizedShare.

    Nunca levanta exceção: dados ausentes viram itens vazios e falhas
    do resolver degradam apenas os campos afetados.

    Args:
        resolver: Resolver de tipo/caminho dos recursos
        event: Evento de share entregue pelo host
        exit_flag_key: Chave do flag de saída nos extras

    Returns:
        Registro normalizado com ação, flag de saída e itens
    """
    items, source = _extract_items(resolver, event)
    record = NormalizedShare(
        action=translate_action(event.action),
        exit_on_sent=read_exit_on_sent(event.extras, exit_flag_key),
        items=tuple(items),
    )
    logger.info(
        "share_event_normalized",
        extra={
            "action": record.action,
            "item_count": len(record.items),
            "source": str(source),
            "exit_on_sent": record.exit_on_sent,
        },
    )
    return record


class ShareNormalizer:
    """Normalizer com resolver e settings injetados.

    Cada chamada é independente; a instância não guarda estado entre eventos.
    """

    def __init__(
        self,
        resolver: ResourceResolverProtocol,
        settings: ShareSettings | None = None,
    ) -> None:
        self._resolver = resolver
        self._exit_flag_key = settings.exit_flag_key if settings else DEFAULT_EXIT_FLAG_KEY

    def normalize(self, event: ShareEvent) -> NormalizedShare:
        """Normaliza o evento sob um correlation_id próprio, se não houver um ativo."""
        with correlation_scope():
            return normalize_share_event(self._resolver, event, exit_flag_key=self._exit_flag_key)

    def normalize_payload(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Parseia o payload do host e retorna o registro serializado.

        Raises:
            InvalidSharePayloadError: Se o payload do host for malformado
        """
        return self.normalize(parse_share_payload(payload)).to_dict()
