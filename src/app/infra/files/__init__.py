"""Provedores de arquivos de sessão."""

from app.infra.files.local_provider import LocalFileProvider

__all__ = ["LocalFileProvider"]
