"""Contrato do resolver de recursos compartilhados.

Evita dependência direta do runtime do host (content resolver, media index).
"""

from __future__ import annotations

from typing import Protocol


class ResourceResolverProtocol(Protocol):
    """Resolve tipo, caminho local e conteúdo de uma referência de recurso.

    Implementações podem levantar exceções; o normalizer converte
    qualquer falha em campo degradado (type None, path vazio).
    """

    def resolve_type(self, uri: str) -> str | None:
        """Retorna o mime type declarado do recurso, se conhecido."""
        ...

    def resolve_path(self, uri: str) -> str:
        """Retorna o caminho local do recurso ou string vazia."""
        ...

    def read_bytes_base64(self, uri: str) -> str:
        """Retorna o conteúdo bruto em Base64 ou string vazia em falha."""
        ...
