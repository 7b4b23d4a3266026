"""Política de CORS com rejeição explícita.

Diferente do CORSMiddleware puro do Starlette (que apenas omite os
headers), uma origem fora da política recebe o envelope de erro
"Not allowed by CORS". Requisições sem header Origin não são CORS e
seguem normalmente. O preflight anuncia os métodos configurados sem
rejeitar o método pedido; o navegador decide com base no anúncio.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware

from api.errors import render_error
from config.settings import WILDCARD_ORIGIN
from utils.errors import CorsNotAllowedError

if TYPE_CHECKING:
    from starlette.responses import Response
    from starlette.types import ASGIApp, Receive, Scope, Send

    from app.infra.webhook import ErrorNotifier
    from config.settings import CorsSettings


@dataclass(frozen=True)
class CorsPolicy:
    """Origens, métodos e flag de credenciais permitidos."""

    origins: frozenset[str]
    methods: tuple[str, ...]
    credentials: bool

    @classmethod
    def from_settings(cls, settings: CorsSettings) -> CorsPolicy:
        return cls(
            origins=frozenset(settings.origins),
            methods=tuple(settings.methods),
            credentials=settings.credentials,
        )

    @property
    def allow_all(self) -> bool:
        return WILDCARD_ORIGIN in self.origins

    def allows(self, origin: str | None) -> bool:
        """Wildcard libera tudo; senão só origens não vazias da lista."""
        if self.allow_all:
            return True
        return bool(origin) and origin in self.origins


class PolicyCORSMiddleware(CORSMiddleware):
    """CORSMiddleware que rejeita origens fora da política."""

    def __init__(
        self,
        app: ASGIApp,
        policy: CorsPolicy,
        notifier: ErrorNotifier | None = None,
    ) -> None:
        super().__init__(
            app,
            allow_origins=sorted(policy.origins),
            allow_methods=["*"],
            allow_headers=["*"],
            allow_credentials=policy.credentials,
        )
        if "*" not in policy.methods:
            self.preflight_headers["Access-Control-Allow-Methods"] = ", ".join(policy.methods)
        self.policy = policy
        self._notifier = notifier

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        # Método fora da lista do HTTP (ex: "FOO"): envelope em vez de text/plain
        if response.status_code == HTTPStatus.BAD_REQUEST:
            return render_error(CorsNotAllowedError(), self._notifier)
        return response

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = Headers(scope=scope).get("origin")
            if origin is not None and not self.policy.allows(origin):
                response = render_error(CorsNotAllowedError(), self._notifier)
                await response(scope, receive, send)
                return
        await super().__call__(scope, receive, send)
