"""Normalizer de share — extração e normalização de eventos de share.

Responsabilidades:
- Traduzir a ação da plataforma para a ação lógica
- Ler o flag "fechar após envio"
- Extrair itens (clip data → extra de stream → data)
- Serializar o registro para transporte entre camadas
"""

from .actions import read_exit_on_sent, translate_action
from .content import read_item_content, serialize_share_with_content
from .extractor import extract_from_clips, extract_from_data, extract_from_extras_stream
from .normalizer import ShareNormalizer, normalize_share_event

__all__ = [
    "ShareNormalizer",
    "extract_from_clips",
    "extract_from_data",
    "extract_from_extras_stream",
    "normalize_share_event",
    "read_exit_on_sent",
    "read_item_content",
    "serialize_share_with_content",
    "translate_action",
]
