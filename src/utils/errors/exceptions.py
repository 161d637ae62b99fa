"""Exceções de domínio para falhas recuperáveis e payloads inválidos."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class ResourceResolutionError(InfrastructureError):
    """Falha do resolver ao consultar tipo, caminho ou conteúdo de um recurso."""


class InvalidSharePayloadError(ValueError):
    """Payload de compartilhamento recebido do host com shape inválido."""
