"""App — núcleo: contratos, infraestrutura e wiring.

Subpastas:
- bootstrap/: composition root (inicialização, wiring)
- infra/: implementações concretas de IO (resolvers)
- protocols/: contratos e modelos canônicos
- observability/: correlation_id por evento
- constants/: constantes do protocolo de share

Padrão: app executa; api adapta; utils apoia.
"""
