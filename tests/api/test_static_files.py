"""Testes da busca de arquivos estáticos usada pela rota catch-all."""

from __future__ import annotations

from pathlib import Path

import pytest

from api.static import StaticDirectory, lookup_static


def _scope(path: str, method: str = "GET") -> dict[str, object]:
    return {
        "type": "http",
        "method": method,
        "path": path,
        "root_path": "",
        "headers": [],
        "query_string": b"",
    }


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "logo.txt").write_text("logo")
    return directory


class TestRelativePath:
    """Mapeamento path da URL → arquivo dentro do diretório."""

    def test_root_prefix(self, public_dir: Path) -> None:
        directory = StaticDirectory.from_path("", public_dir)

        assert directory.relative_path("/css/app.css") == "css/app.css"
        assert directory.relative_path("/") is None

    def test_store_prefix(self, tmp_path: Path) -> None:
        directory = StaticDirectory.from_path("/store/", tmp_path)

        assert directory.prefix == "/store"
        assert directory.relative_path("/store/inst/qr.png") == "inst/qr.png"
        assert directory.relative_path("/storefront/x") is None
        assert directory.relative_path("/store") is None


class TestLookupStatic:
    """lookup_static devolve a resposta do arquivo ou None."""

    @pytest.mark.asyncio
    async def test_existing_file(self, public_dir: Path) -> None:
        directories = [StaticDirectory.from_path("", public_dir)]

        response = await lookup_static(directories, _scope("/logo.txt"))

        assert response is not None
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_missing_file_is_none(self, public_dir: Path) -> None:
        directories = [StaticDirectory.from_path("", public_dir)]

        assert await lookup_static(directories, _scope("/missing.txt")) is None

    @pytest.mark.asyncio
    async def test_path_traversal_is_none(self, tmp_path: Path, public_dir: Path) -> None:
        (tmp_path / "secret.txt").write_text("secret")
        directories = [StaticDirectory.from_path("", public_dir)]

        assert await lookup_static(directories, _scope("/../secret.txt")) is None

    @pytest.mark.asyncio
    async def test_non_get_methods_skip_lookup(self, public_dir: Path) -> None:
        directories = [StaticDirectory.from_path("", public_dir)]

        assert await lookup_static(directories, _scope("/logo.txt", method="POST")) is None
