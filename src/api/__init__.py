"""API: camada de borda HTTP.

Responsabilidades:
- Política HTTP (CORS, limite de corpo, gzip, correlation_id)
- Envelope JSON de erro e rota de 404
- Rotas primárias e healthcheck

Subpastas:
- middleware/: política aplicada a toda requisição
- errors/: envelope de erro e handlers
- routes/: endpoints HTTP

NÃO PODE conter: decisão de transporte, ciclo de vida, acesso a stores.
"""
