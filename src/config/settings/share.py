"""Settings do normalizer de share.

Chave do flag de saída e limites de leitura de conteúdo.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from app.constants.share import DEFAULT_EXIT_FLAG_KEY

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONTENT_BYTES = 16 * 1024 * 1024  # 16MB


@dataclass(frozen=True)
class ShareSettings:
    """Configurações do normalizer de share.

    Attributes:
        exit_flag_key: Chave dos extras lida como "fechar após envio"
        max_content_bytes: Tamanho máximo lido em read_bytes_base64
    """

    exit_flag_key: str = DEFAULT_EXIT_FLAG_KEY
    max_content_bytes: int = DEFAULT_MAX_CONTENT_BYTES

    def validate(self) -> list[str]:
        """Valida configurações do normalizer.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if not self.exit_flag_key:
            errors.append("SHARE_EXIT_FLAG_KEY não pode ser vazio")
        if self.max_content_bytes <= 0:
            errors.append("SHARE_MAX_CONTENT_BYTES deve ser positivo")
        return errors


def _parse_int(raw: str | None, default: int) -> int:
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("share_settings_invalid_int", extra={"fallback": default})
        return default


def _load_share_from_env() -> ShareSettings:
    """Carrega ShareSettings de variáveis de ambiente."""
    return ShareSettings(
        exit_flag_key=os.getenv("SHARE_EXIT_FLAG_KEY", DEFAULT_EXIT_FLAG_KEY),
        max_content_bytes=_parse_int(
            os.getenv("SHARE_MAX_CONTENT_BYTES"),
            DEFAULT_MAX_CONTENT_BYTES,
        ),
    )


@lru_cache(maxsize=1)
def get_share_settings() -> ShareSettings:
    """Retorna instância cacheada de ShareSettings."""
    return _load_share_from_env()
