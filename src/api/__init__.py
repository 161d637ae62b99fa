"""API — camada de borda do evento de share.

Responsabilidades:
- Receber e validar o payload entregue pelo host
- Normalizar eventos de share para o registro canônico
- Aplicar heurísticas de URL e mime type

Subpastas:
- connectors/: parse do payload do host
- normalizers/: conversão de eventos → NormalizedShare
- validators/: heurísticas de URL e mime types

NÃO PODE conter: IO de recursos (fica em app/infra).
"""
