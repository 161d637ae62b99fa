"""Bootstrap da aplicação — inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e conecta o resolver concreto ao normalizer.

Uso:
    from app.bootstrap import initialize_app, get_share_normalizer

    initialize_app()
    record = get_share_normalizer().normalize_payload(host_payload)
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_share_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação (logging JSON com correlation_id).

    Deve ser chamada uma vez no início do processo.
    """
    settings = get_base_settings()
    configure_logging(
        level=settings.log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"share: {error}" for error in get_share_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_resource_resolver():
    """Obtém o resolver local (singleton).

    Returns:
        ResourceResolverProtocol baseado no sistema de arquivos
    """
    from app.infra.resolvers import LocalResourceResolver

    return LocalResourceResolver(max_content_bytes=get_share_settings().max_content_bytes)


@lru_cache(maxsize=1)
def get_share_normalizer():
    """Obtém o normalizer de share (singleton).

    Returns:
        ShareNormalizerProtocol com o resolver padrão
    """
    from api.normalizers.share import ShareNormalizer

    return ShareNormalizer(get_resource_resolver(), get_share_settings())
