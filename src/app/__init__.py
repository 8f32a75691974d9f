"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: pipeline de envio do contato
- domain/: submissão normalizada e estados do pipeline
- infra/: implementações concretas de IO (cliente HTTP)
- protocols/: contratos/interfaces
- observability/: logs estruturados, correlation_id, métricas
- constants/: mensagens devolvidas ao cliente

Padrão: app executa; api adapta; config configura.
"""
