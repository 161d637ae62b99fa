"""Parse do payload bruto entregue pelo host para ShareEvent.

O host serializa o evento de share como mapeamento:

    {
        "action": "android.intent.action.SEND",
        "extras": {"android.intent.extra.TEXT": "...", "exit_on_sent": true},
        "clip_mime_types": ["text/plain"],
        "clip_items": [{"text": "...", "uri": null}],
        "data": "content://media/42"
    }

`clip_mime_types` é a declaração da coleção; quando presente é aplicada
a todos os itens que não declaram `mime_types` próprios.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.protocols.models import ClipItem, ShareEvent
from utils.errors import InvalidSharePayloadError

if TYPE_CHECKING:
    from collections.abc import Mapping


class ClipItemPayload(BaseModel):
    """Entrada de clip como recebida do host."""

    model_config = ConfigDict(extra="ignore")

    mime_types: list[str] = Field(default_factory=list)
    text: str | None = None
    uri: str | None = None


class ShareEventPayload(BaseModel):
    """Evento de share como recebido do host."""

    model_config = ConfigDict(extra="ignore")

    action: str | None = None
    extras: dict[str, Any] | None = None
    clip_mime_types: list[str] | None = None
    clip_items: list[ClipItemPayload] | None = None
    data: str | None = None

    def to_event(self) -> ShareEvent:
        """Converte para o modelo interno imutável."""
        clip_items: tuple[ClipItem, ...] | None = None
        if self.clip_items is not None:
            collection_types = frozenset(self.clip_mime_types or ())
            clip_items = tuple(
                ClipItem(
                    mime_types=frozenset(item.mime_types) or collection_types,
                    text=item.text,
                    uri=item.uri,
                )
                for item in self.clip_items
            )
        return ShareEvent(
            action=self.action,
            extras=dict(self.extras) if self.extras is not None else None,
            clip_items=clip_items,
            data=self.data,
        )


def parse_share_payload(payload: Mapping[str, Any]) -> ShareEvent:
    """Valida o payload do host e retorna o ShareEvent correspondente.

    Raises:
        InvalidSharePayloadError: Se o payload não for um objeto válido
    """
    try:
        model = ShareEventPayload.model_validate(payload)
    except ValidationError as exc:
        raise InvalidSharePayloadError("invalid_share_payload") from exc
    return model.to_event()
