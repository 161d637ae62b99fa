"""Connectors — adapters de borda para payloads do host.

Estrutura:
- share/: parse do evento de share entregue pelo runtime do host
"""

__all__: list[str] = []
