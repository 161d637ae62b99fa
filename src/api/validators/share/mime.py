"""Comparação de mime types declarados por uma coleção de clip."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def mime_type_matches(concrete: str, wanted: str) -> bool:
    """Compara um tipo declarado com o tipo desejado.

    `wanted` aceita curinga ("*/*" ou "image/*"); `concrete` é comparado
    literalmente.
    """
    if wanted == "*/*":
        return True
    if wanted.endswith("/*"):
        return concrete.startswith(wanted[:-1])
    return concrete == wanted


def has_mime_type(declared: Iterable[str], wanted: str) -> bool:
    """True se algum tipo declarado corresponde a `wanted`."""
    return any(mime_type_matches(concrete, wanted) for concrete in declared)
