"""Helpers de construção de itens (recurso e texto/URL).

Separado de extractor.py: aqui ficam as folhas usadas por todos
os extratores. Nenhuma função levanta exceção.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from app.constants.share import ExtraKey
from app.protocols.models import ResourceItem, TextItem

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from app.protocols.models import ShareItem
    from app.protocols.resource_resolver import ResourceResolverProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _safe_resolver_call(
    operation: str,
    call: Callable[[str], T],
    uri: str,
    default: T,
) -> T:
    """Executa uma chamada ao resolver convertendo falhas em `default`."""
    try:
        return call(uri)
    except Exception as exc:
        logger.warning(
            "share_resolver_call_failed",
            extra={"operation": operation, "error_type": type(exc).__name__},
        )
        return default


def get_string_extra(extras: Mapping[str, Any] | None, key: str) -> str | None:
    """Lê um extra textual; valores não-string contam como ausentes."""
    if not extras:
        return None
    value = extras.get(key)
    return value if isinstance(value, str) else None


def item_from_resource(
    resolver: ResourceResolverProtocol,
    uri: str | None,
) -> ResourceItem | None:
    """Constrói um ResourceItem consultando tipo e caminho no resolver.

    Uri ausente retorna None para permitir encadear fallbacks.
    Caminho não resolvido vira string vazia.
    """
    if not uri or not isinstance(uri, str):
        return None
    mime_type = _safe_resolver_call("resolve_type", resolver.resolve_type, uri, None)
    path = _safe_resolver_call("resolve_path", resolver.resolve_path, uri, "")
    return ResourceItem(uri=uri, type=mime_type, path=path or "")


def item_from_text(extras: Mapping[str, Any] | None) -> TextItem | None:
    """Constrói um TextItem a partir do texto e assunto dos extras."""
    if extras is None:
        return None
    return TextItem(
        url=get_string_extra(extras, ExtraKey.TEXT),
        title=get_string_extra(extras, ExtraKey.SUBJECT),
    )


def first_item(*attempts: Callable[[], ShareItem | None]) -> ShareItem | None:
    """Avalia as tentativas em ordem; a primeira não vazia vence."""
    for attempt in attempts:
        item = attempt()
        if item is not None:
            return item
    return None
