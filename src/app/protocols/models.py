"""Modelos canônicos do evento de share e do registro normalizado.

Entrada: ShareEvent (imutável, um por ação de compartilhamento do usuário).
Saída: NormalizedShare, serializável para o formato de transporte
`{"action", "exit", "items"}` consumido pela camada de script.

Os itens formam uma união discriminada pela classe: ResourceItem ou TextItem.
Cada item carrega apenas os campos do seu formato.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class ClipItem:
    """Entrada de uma coleção de clip.

    Atributos:
        mime_types: Tipos declarados para a coleção inteira (não só este item)
        text: Conteúdo textual do item, quando houver
        uri: Referência de recurso do item, quando houver
    """

    mime_types: frozenset[str] = frozenset()
    text: str | None = None
    uri: str | None = None


@dataclass(frozen=True, slots=True)
class ShareEvent:
    """Evento de compartilhamento entregue pelo host."""

    action: str | None
    extras: Mapping[str, Any] | None = None
    clip_items: tuple[ClipItem, ...] | None = None
    data: str | None = None

    @property
    def clip_mime_types(self) -> frozenset[str]:
        """Declaração de mime types da coleção (união dos itens)."""
        if not self.clip_items:
            return frozenset()
        declared: set[str] = set()
        for clip_item in self.clip_items:
            declared.update(clip_item.mime_types)
        return frozenset(declared)


@dataclass(frozen=True, slots=True)
class ResourceItem:
    """Item baseado em recurso resolvido (arquivo, mídia, etc.)."""

    uri: str
    type: str | None = None
    path: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "uri": self.uri, "path": self.path}


@dataclass(frozen=True, slots=True)
class TextItem:
    """Item textual (link compartilhado com título opcional)."""

    url: str | None = None
    title: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "title": self.title}


ShareItem = ResourceItem | TextItem


@dataclass(frozen=True, slots=True)
class NormalizedShare:
    """Registro uniforme produzido para qualquer ShareEvent.

    Atributos:
        action: Ação lógica (SEND, VIEW) ou a string original
        exit_on_sent: Se o host deve fechar após o envio
        items: Itens extraídos pelo primeiro extrator não vazio
    """

    action: str | None
    exit_on_sent: bool = False
    items: tuple[ShareItem, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serializa para a estrutura de transporte entre camadas."""
        return {
            "action": self.action,
            "exit": self.exit_on_sent,
            "items": [item.to_dict() for item in self.items],
        }


__all__ = [
    "ClipItem",
    "NormalizedShare",
    "ResourceItem",
    "ShareEvent",
    "ShareItem",
    "TextItem",
]
