"""Testes da política de CORS (dataclass e middleware)."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.errors import register_error_handlers, register_not_found_route
from api.middleware import CorsPolicy, apply_http_policy, build_http_policy
from config.settings import CorsSettings


def _client(origins: tuple[str, ...], *, credentials: bool = True) -> TestClient:
    app = FastAPI()

    @app.get("/instance")
    async def instance() -> dict[str, str]:
        return {"ok": "yes"}

    cors = CorsSettings(origins=origins, methods=("GET", "POST"), credentials=credentials)
    apply_http_policy(app, build_http_policy(cors))
    register_error_handlers(app, notifier=None)
    register_not_found_route(app)
    return TestClient(app)


class TestCorsPolicy:
    """Regras de `CorsPolicy.allows`."""

    def test_wildcard_allows_anything(self) -> None:
        policy = CorsPolicy(origins=frozenset({"*"}), methods=("GET",), credentials=True)

        assert policy.allow_all is True
        assert policy.allows("https://random.example") is True
        assert policy.allows(None) is True

    @pytest.mark.parametrize(
        ("origin", "expected"),
        [
            ("https://app.example", True),
            ("https://evil.example", False),
            ("", False),
            (None, False),
        ],
    )
    def test_explicit_list(self, origin: str | None, expected: bool) -> None:
        policy = CorsPolicy(
            origins=frozenset({"https://app.example"}),
            methods=("GET",),
            credentials=False,
        )

        assert policy.allows(origin) is expected

    def test_from_settings(self) -> None:
        settings = CorsSettings(origins=("https://a.example",), methods=("GET",), credentials=False)

        policy = CorsPolicy.from_settings(settings)

        assert policy.origins == frozenset({"https://a.example"})
        assert policy.methods == ("GET",)
        assert policy.credentials is False


class TestPolicyCorsMiddleware:
    """Comportamento HTTP da política de CORS."""

    def test_wildcard_accepts_any_origin(self) -> None:
        with _client(("*",)) as client:
            response = client.get("/instance", headers={"Origin": "https://random.example"})

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers

    def test_listed_origin_is_echoed(self) -> None:
        with _client(("https://app.example",)) as client:
            response = client.get("/instance", headers={"Origin": "https://app.example"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "https://app.example"

    def test_unlisted_origin_is_rejected_without_leaking_the_list(self) -> None:
        with _client(("https://app.example",)) as client:
            response = client.get("/instance", headers={"Origin": "https://evil.example"})

        assert response.status_code == 403
        assert response.json() == {
            "status": 403,
            "error": "Forbidden",
            "response": {"message": "Not allowed by CORS"},
        }
        assert "app.example" not in response.text

    def test_request_without_origin_passes(self) -> None:
        with _client(("https://app.example",)) as client:
            response = client.get("/instance")

        assert response.status_code == 200
        assert response.json() == {"ok": "yes"}

    def test_preflight_for_listed_origin(self) -> None:
        with _client(("https://app.example",)) as client:
            response = client.options(
                "/instance",
                headers={
                    "Origin": "https://app.example",
                    "Access-Control-Request-Method": "POST",
                },
            )

        assert response.status_code == 200
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_preflight_for_unlisted_method_advertises_configured_methods(self) -> None:
        with _client(("https://app.example",)) as client:
            response = client.options(
                "/instance",
                headers={
                    "Origin": "https://app.example",
                    "Access-Control-Request-Method": "PATCH",
                },
            )

        assert response.status_code == 200
        assert response.headers["access-control-allow-methods"] == "GET, POST"
        assert response.headers["access-control-allow-origin"] == "https://app.example"

    def test_preflight_for_unknown_method_is_json_envelope(self) -> None:
        with _client(("https://app.example",)) as client:
            response = client.options(
                "/instance",
                headers={
                    "Origin": "https://app.example",
                    "Access-Control-Request-Method": "FOO",
                },
            )

        assert response.status_code == 403
        assert response.headers["content-type"] == "application/json"
        assert response.json()["response"] == {"message": "Not allowed by CORS"}
