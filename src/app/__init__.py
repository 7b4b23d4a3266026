"""App: ciclo de vida do processo, infraestrutura e wiring.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- lifecycle/: orquestrador, transporte, drenagem e montagem do app
- runtime/: tasks destacadas (fire-and-forget)
- infra/: implementações concretas de IO (stores, webhook, arquivos, eventos)
- protocols/: contratos/interfaces dos colaboradores
- sessions/: monitor das instâncias WhatsApp
- observability/: correlation_id e hook de erros inesperados
- constants/: constantes da aplicação

Padrão: app executa; api adapta; utils apoia.
"""
