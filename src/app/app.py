"""Entrypoint do WhatsApp Gateway.

Carrega as settings, configura logging e entrega o processo ao
LifecycleOrchestrator, que decide o transporte, a porta e a saída.

Uso:
    whatsapp-gateway
    python -m app.app

Cloud Run:
    A porta injetada em PORT tem precedência sobre SERVER_PORT.
"""

from __future__ import annotations

import asyncio
import os
import sys

from app.bootstrap import create_collaborators, initialize_app, validate_runtime_settings
from app.lifecycle import LifecycleOrchestrator
from config.logging import get_logger
from config.settings import load_app_settings

logger = get_logger(__name__)


async def serve() -> int:
    """Executa o ciclo de vida completo e devolve o código de saída."""
    settings = load_app_settings()
    initialize_app(settings)
    validate_runtime_settings(settings)

    logger.info("app_starting", extra={"environment": settings.base.environment})
    orchestrator = LifecycleOrchestrator(
        settings,
        create_collaborators(settings),
        port_override=os.getenv("PORT"),
    )
    return await orchestrator.run()


def main() -> None:
    """Entrypoint de linha de comando."""
    sys.exit(asyncio.run(serve()))


if __name__ == "__main__":
    main()
