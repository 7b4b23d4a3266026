"""Settings do webhook de erros.

Quando habilitado, cada erro não tratado vira um evento enviado
(best-effort) para a URL configurada.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class WebhookSettings:
    """Configurações do webhook de erros.

    Attributes:
        errors_enabled: Liga/desliga o envio de eventos de erro
        errors_url: URL que recebe o POST (sem sufixo de path)
        request_timeout_seconds: Timeout do POST
    """

    errors_enabled: bool = False
    errors_url: str = ""
    request_timeout_seconds: float = 10.0

    @property
    def is_active(self) -> bool:
        """True quando há URL e a flag está ligada."""
        return self.errors_enabled and bool(self.errors_url.strip())

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.errors_enabled and not self.errors_url.strip():
            errors.append("WEBHOOK_EVENTS_ERRORS_WEBHOOK não configurado")
        if self.errors_url and not self.errors_url.startswith(("http://", "https://")):
            errors.append("WEBHOOK_EVENTS_ERRORS_WEBHOOK deve ser http(s)")
        if self.request_timeout_seconds <= 0:
            errors.append("WEBHOOK_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_webhook_from_env() -> WebhookSettings:
    """Carrega WebhookSettings de variáveis de ambiente."""
    return WebhookSettings(
        errors_enabled=os.getenv("WEBHOOK_EVENTS_ERRORS", "").lower() in ("true", "1", "yes"),
        errors_url=os.getenv("WEBHOOK_EVENTS_ERRORS_WEBHOOK", ""),
        request_timeout_seconds=float(os.getenv("WEBHOOK_REQUEST_TIMEOUT_SECONDS", "10")),
    )
