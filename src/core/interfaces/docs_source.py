"""Contrato de fuentes de documentación remota.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El pipeline no sabe nada de HTTP: en tests basta con una fuente en memoria.
"""

from __future__ import annotations

from typing import AsyncIterator, Callable, Protocol, runtime_checkable

from core.domain.models import RemoteFile


@runtime_checkable
class DocsSource(Protocol):
    """Contrato mínimo para listar y leer documentación.

    Reglas de diseño:
    - `iter_files` es un iterador asíncrono perezoso: cada llamada recorre el
      árbol de nuevo y entrega cada fichero válido exactamente una vez.
    - Los avisos del listado (p.ej. ruta inexistente) van a `on_warning`;
      quien orquesta decide cómo mostrarlos.
    - `fetch_text` devuelve el contenido decodificado en UTF-8.
    """

    def iter_files(
        self,
        document_path: str,
        *,
        on_warning: Callable[[str], None] | None = None,
    ) -> AsyncIterator[RemoteFile]:
        """Recorre `document_path` y entrega los ficheros de documentación."""

        ...

    async def fetch_text(self, file: RemoteFile) -> str:
        """Descarga el contenido de un fichero listado."""

        ...
