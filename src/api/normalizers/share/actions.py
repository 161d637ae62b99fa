"""Tradução de ação e leitura do flag de saída.

Funções totais: nunca levantam exceção, ausência de dados vira default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.share import DEFAULT_EXIT_FLAG_KEY, PlatformAction, ShareAction

if TYPE_CHECKING:
    from collections.abc import Mapping

_ACTION_MAP: dict[str, str] = {
    PlatformAction.SEND: ShareAction.SEND,
    PlatformAction.SEND_MULTIPLE: ShareAction.SEND,
    PlatformAction.VIEW: ShareAction.VIEW,
}

_TRUTHY_STRINGS = frozenset({"true", "1", "yes"})


def translate_action(action: str | None) -> str | None:
    """Mapeia a ação da plataforma para a ação lógica (SEND/VIEW).

    Ações desconhecidas são repassadas sem alteração.
    """
    if action is None:
        return None
    translated = _ACTION_MAP.get(action)
    return str(translated) if translated is not None else action


def _coerce_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY_STRINGS
    if isinstance(value, int):
        return value != 0
    return False


def read_exit_on_sent(
    extras: Mapping[str, Any] | None,
    key: str = DEFAULT_EXIT_FLAG_KEY,
) -> bool:
    """Lê o flag "fechar após envio" dos extras. Default False."""
    if not extras:
        return False
    try:
        value = extras.get(key)
    except (AttributeError, TypeError):
        return False
    return _coerce_flag(value)
