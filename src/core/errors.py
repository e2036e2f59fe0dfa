"""Errores del dominio.

Las funciones puras de layout no lanzan nada; estos errores cubren el borde
(URL del repo, API de GitHub) y la CLI los traduce a exit code 1.
"""

from __future__ import annotations

from datetime import datetime, timezone


class ExtractorError(Exception):
    """Base de todos los errores esperados del extractor."""


class InvalidRepoUrlError(ExtractorError, ValueError):
    pass


class GitHubApiError(ExtractorError):
    """Respuesta no exitosa de la API de GitHub."""

    def __init__(self, status: int, path: str, message: str | None = None) -> None:
        self.status = status
        self.path = path
        super().__init__(message or f"GitHub API returned {status} for '{path}'")


class RateLimitError(GitHubApiError):
    """403/429: rate limit agotado (o acceso denegado sin token)."""

    def __init__(self, status: int, path: str, reset_at: int | None = None) -> None:
        self.reset_at = reset_at
        message = f"GitHub API rate limit exceeded (HTTP {status}) while requesting '{path}'"
        if reset_at is not None:
            reset = datetime.fromtimestamp(reset_at, tz=timezone.utc)
            message += f"; resets at {reset.isoformat(timespec='seconds')}"
        super().__init__(status, path, message)
