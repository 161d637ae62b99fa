"""Configuração centralizada de logging.

Logging estruturado JSON com campos obrigatórios
(correlation_id, service, level, logger, message).

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="share-normalizer")

    logger = get_logger(__name__)
    logger.info("share_event_normalized", extra={"item_count": 2})

Nunca registrar uris, textos compartilhados ou caminhos locais.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "share-normalizer"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do evento de share em processamento.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    source: str | None = None,
) -> None:
    """Log observável de fallback usado (sem PII).

    Registra quando um caminho secundário foi acionado
    (ex: extrator de extras após clip data vazio).

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "share_extractor").
        reason: Razão do fallback (ex: "clip_data_empty").
        source: Caminho que efetivamente produziu o resultado.
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if source:
        extra["source"] = source

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
