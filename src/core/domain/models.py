"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Todos son inmutables (frozen): cada transformación produce un valor nuevo.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RepoRef(BaseModel):
    """Repositorio GitHub `owner/repo`."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="Usuario u organización.")
    repo: str = Field(..., min_length=1, description="Nombre del repositorio.")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class DocumentPathConfig(BaseModel):
    """Una entrada de `--paths` con su output root ya resuelto.

    Por qué existe:
    - El output root se calcula una sola vez por ruta y se reutiliza para
      todos los ficheros encontrados debajo de ella.
    """

    model_config = ConfigDict(frozen=True)

    document_path: str = Field(
        ...,
        description="Ruta normalizada dentro del repo (separador '/', sin vacíos).",
    )
    output_root: str | None = Field(
        default=None,
        description="Subdirectorio de salida (None = raíz del directorio de salida).",
    )


class RemoteFile(BaseModel):
    """Fichero reportado por el listado remoto."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    path: str = Field(..., description="Ruta completa dentro del repo.")
    name: str = Field(..., description="Nombre base del fichero.")
    sha: str | None = Field(default=None, description="Blob SHA (si la API lo da).")
    size: int | None = Field(default=None, ge=0, description="Tamaño en bytes.")
    download_url: str | None = Field(default=None, description="URL raw del contenido.")

    document_path: str | None = Field(
        default=None,
        description="Ruta de documentación bajo la que se encontró (la añade el pipeline).",
    )
    output_root: str | None = Field(
        default=None,
        description="Output root de esa ruta (lo añade el pipeline).",
    )

    def with_origin(self, config: DocumentPathConfig) -> "RemoteFile":
        return self.model_copy(
            update={"document_path": config.document_path, "output_root": config.output_root}
        )


class OutputLocation(BaseModel):
    """Destino final en disco de un fichero aplanado."""

    model_config = ConfigDict(frozen=True)

    directory: str
    filename: str

    @property
    def path(self) -> Path:
        return Path(self.directory) / self.filename


class ExtractionResult(BaseModel):
    """Resultado de una ejecución completa del pipeline."""

    repo: RepoRef
    output_dir: str
    files_found: int = Field(default=0, ge=0)
    files_written: list[Path] = Field(default_factory=list)
    skipped_collisions: list[str] = Field(
        default_factory=list,
        description="Rutas remotas descartadas porque otro fichero ya ocupaba su destino.",
    )
    archive_path: Path | None = None
    warnings: list[str] = Field(default_factory=list)
