"""Protocolos de normalização de eventos de share."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import NormalizedShare, ShareEvent


class ShareNormalizerProtocol(Protocol):
    """Contrato mínimo para normalização de eventos de share."""

    def normalize(self, event: ShareEvent) -> NormalizedShare: ...

    def normalize_payload(self, payload: Mapping[str, Any]) -> dict[str, Any]: ...
