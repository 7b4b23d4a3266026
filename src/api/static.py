"""Arquivos estáticos servidos pela rota catch-all.

`public/` responde na raiz e `store/` sob /store. Arquivo ausente não
é erro: a busca devolve None e a requisição segue para o 404.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING

from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from starlette.responses import Response
    from starlette.types import Scope

STATIC_METHODS = frozenset({"GET", "HEAD"})


@dataclass(frozen=True)
class StaticDirectory:
    """Diretório servido sob um prefixo ("" para a raiz)."""

    prefix: str
    files: StaticFiles

    @classmethod
    def from_path(cls, prefix: str, directory: Path) -> StaticDirectory:
        return cls(prefix=prefix.rstrip("/"), files=StaticFiles(directory=directory))

    def relative_path(self, path: str) -> str | None:
        """Caminho dentro do diretório, ou None se o prefixo não casar."""
        if not self.prefix:
            relative = path
        elif path.startswith(f"{self.prefix}/"):
            relative = path[len(self.prefix) :]
        else:
            return None
        relative = relative.lstrip("/")
        return os.path.normpath(relative) if relative else None


async def lookup_static(
    directories: Sequence[StaticDirectory],
    scope: Scope,
) -> Response | None:
    """Primeiro arquivo encontrado, na ordem dos diretórios."""
    if scope["method"] not in STATIC_METHODS:
        return None
    for directory in directories:
        relative = directory.relative_path(scope["path"])
        if relative is None:
            continue
        try:
            return await directory.files.get_response(relative, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != HTTPStatus.NOT_FOUND:
                raise
    return None
