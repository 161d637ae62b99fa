"""Configuração do pytest para o normalizer de share."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Isola settings e singletons cacheados entre testes."""
    from app.bootstrap import get_resource_resolver, get_share_normalizer
    from config.settings import get_base_settings, get_share_settings

    caches = (get_base_settings, get_share_settings, get_resource_resolver, get_share_normalizer)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Desfaz configure_logging() chamado dentro de um teste."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
