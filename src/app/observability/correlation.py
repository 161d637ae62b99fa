"""Gerenciamento de correlation_id por evento de share.

Cada evento processado recebe um id injetado em todos os logs do seu
processamento. Usa ContextVar para ser thread/async-safe.

Uso:
    from app.observability import correlation_scope

    with correlation_scope(host_event_id):
        normalize_share_event(resolver, event)
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual; gera um UUID se None."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Garante um correlation_id durante o bloco.

    Um id já ativo é preservado quando nenhum id explícito é informado.
    """
    current = get_correlation_id()
    if current and correlation_id is None:
        yield current
        return
    token = set_correlation_id(correlation_id)
    try:
        yield get_correlation_id()
    finally:
        reset_correlation_id(token)
