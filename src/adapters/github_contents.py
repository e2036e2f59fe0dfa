"""Fuente de documentación: API "contents" de GitHub.

Por qué la API REST y no `git clone`:
- Solo necesitamos los `.md`/`.mdx` de uno o varios subárboles.
- Funciona igual con repos públicos y privados (token en GITHUB_TOKEN).

El recorrido usa una pila explícita: cada llamada a `iter_files` es perezosa,
finita y se puede repetir.
"""

from __future__ import annotations

import base64
from typing import Any, AsyncIterator, Callable
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import RemoteFile, RepoRef
from core.errors import GitHubApiError, RateLimitError
from core.interfaces.docs_source import DocsSource
from core.logging_utils import get_logger


logger = get_logger("github")

_RATE_LIMIT_STATUSES = (403, 429)


class GitHubContentsSource(DocsSource):
    """Lista y descarga documentación de un repo vía `/repos/{o}/{r}/contents`."""

    def __init__(
        self,
        repo: RepoRef,
        *,
        settings: AppSettings | None = None,
        ref: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._repo = repo
        self._settings = settings or AppSettings()
        self._ref = ref
        self._client = build_async_client(self._settings, transport=transport)
        self._extensions = tuple(e.lower() for e in self._settings.doc_extensions)

    async def __aenter__(self) -> "GitHubContentsSource":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _contents_url(self, path: str) -> str:
        base = f"/repos/{self._repo.owner}/{self._repo.repo}/contents"
        path = path.strip("/")
        return f"{base}/{quote(path, safe='/')}" if path else base

    def _params(self) -> dict[str, str]:
        return {"ref": self._ref} if self._ref else {}

    def _is_doc(self, name: str) -> bool:
        return name.lower().endswith(self._extensions)

    def _raise_for_status(self, resp: httpx.Response, path: str) -> None:
        if resp.status_code in _RATE_LIMIT_STATUSES:
            reset = resp.headers.get("X-RateLimit-Reset")
            raise RateLimitError(
                resp.status_code,
                path,
                reset_at=int(reset) if reset and reset.isdigit() else None,
            )
        if resp.status_code >= 400:
            raise GitHubApiError(resp.status_code, path)

    async def _get_contents(self, path: str) -> Any | None:
        """GET de la API contents. `None` si la ruta no existe (404)."""

        resp = await self._client.get(self._contents_url(path), params=self._params())
        logger.debug("GET contents %s -> %s", path or "/", resp.status_code)
        if resp.status_code == 404:
            return None
        self._raise_for_status(resp, path)
        return resp.json()

    async def iter_files(
        self,
        document_path: str,
        *,
        on_warning: Callable[[str], None] | None = None,
    ) -> AsyncIterator[RemoteFile]:
        stack = [document_path]
        while stack:
            current = stack.pop()
            payload = await self._get_contents(current)
            if payload is None:
                message = f'Path "{current}" not found in repository {self._repo.full_name}. Skipping.'
                # El aviso visible lo emite quien recibe `on_warning`.
                logger.info(message)
                if on_warning:
                    on_warning(message)
                continue

            # Si la ruta apunta a un fichero, la API devuelve un objeto, no una lista.
            entries = payload if isinstance(payload, list) else [payload]
            subdirs: list[str] = []
            for item in entries:
                if not isinstance(item, dict):
                    continue
                kind = item.get("type")
                if kind == "dir" and item.get("path"):
                    subdirs.append(item["path"])
                elif kind == "file" and self._is_doc(str(item.get("name", ""))):
                    yield RemoteFile.model_validate(item)

            # Orden de listado: el primer subdirectorio se visita primero.
            stack.extend(reversed(subdirs))

    async def fetch_text(self, file: RemoteFile) -> str:
        payload = await self._get_contents(file.path)
        if payload is None:
            raise GitHubApiError(404, file.path)

        data = payload if isinstance(payload, dict) else {}
        content = data.get("content")
        if isinstance(content, str) and content and data.get("encoding", "base64") == "base64":
            return base64.b64decode(content).decode("utf-8", errors="replace")

        # Ficheros > 1 MB: la API no incluye el contenido inline (encoding "none").
        url = data.get("download_url") or file.download_url
        if not url:
            raise GitHubApiError(200, file.path, f"No content available for '{file.path}'")

        resp = await self._client.get(url)
        logger.debug("GET raw %s -> %s", url, resp.status_code)
        self._raise_for_status(resp, file.path)
        return resp.text


async def fetch_rate_limit(
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    """Devuelve el bloque `resources.core` de `GET /rate_limit` (no consume cuota)."""

    async with build_async_client(settings, transport=transport) as client:
        resp = await client.get("/rate_limit")
    resp.raise_for_status()
    data = resp.json()
    core = data.get("resources", {}).get("core") if isinstance(data, dict) else None
    return core if isinstance(core, dict) else {}
