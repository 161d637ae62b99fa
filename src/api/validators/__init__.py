"""Validators — heurísticas aplicadas a payloads de share.

Estrutura:
- share/: heurística de URL e comparação de mime types
"""

__all__: list[str] = []
