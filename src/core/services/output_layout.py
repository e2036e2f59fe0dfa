"""Layout de salida: dónde acaba en disco cada fichero de documentación.

Dos funciones puras hacen el aplanado:

- `resolve_output_root` convierte una ruta de documentación (el valor de
  `--paths`) en un nombre de directorio de un solo nivel, o `None` si los
  ficheros van directos al directorio de salida.
- `build_output_location` lleva la ruta de un fichero del repo a su par
  `(directory, filename)` final: las carpetas bajo la ruta de documentación se
  pliegan en un prefijo con guiones.

Son síncronas y sin efectos laterales; el pipeline las llama desde cualquier
tarea sin coordinación.

Ejemplos:

    resolve_output_root("docs")                 -> None
    resolve_output_root("docs/code")            -> "code"
    resolve_output_root("packages/react/docs")  -> "react-docs"
    resolve_output_root("react/three/docs/v1")  -> "docs-v1"

    build_output_location("docs/api/intro.md", "docs", None, "./output")
        -> OutputLocation(directory="./output", filename="api-intro.md")
"""

from __future__ import annotations

import os

from core.domain.models import DocumentPathConfig, OutputLocation, RemoteFile


DOC_CONTAINER_NAMES: frozenset[str] = frozenset({"doc", "docs", "documentation"})


def split_segments(path: str) -> list[str]:
    """Parte por `/` o `\\` y descarta los segmentos vacíos."""

    return [s for s in path.replace("\\", "/").split("/") if s]


def resolve_output_root(document_path: str) -> str | None:
    """Nombre del directorio raíz de salida para una ruta de documentación.

    Un contenedor inicial (`doc`, `docs`, `documentation`) se ignora; los que
    aparecen más adentro se conservan. Si quedan varios segmentos, se unen los
    dos últimos con un guion.
    """

    segments = split_segments(document_path)

    if not segments:
        return None

    if len(segments) == 1:
        return None if segments[0] in DOC_CONTAINER_NAMES else segments[0]

    effective = segments[1:] if segments[0] in DOC_CONTAINER_NAMES else segments

    if len(effective) == 1:
        return effective[0]

    return "-".join(effective[-2:])


def path_config_for(raw_path: str) -> DocumentPathConfig:
    """Normaliza un valor de `--paths` y resuelve su output root una sola vez."""

    return DocumentPathConfig(
        document_path="/".join(split_segments(raw_path)),
        output_root=resolve_output_root(raw_path),
    )


def build_output_location(
    file_path: str,
    document_path: str,
    output_root: str | None,
    output_dir: str,
) -> OutputLocation:
    """Directorio y nombre aplanados para un fichero del repositorio.

    Las rutas que no empiezan por `document_path` se aplanan completas en vez
    de fallar.
    """

    normalized = file_path.replace("\\", "/")
    doc_prefix = f"{document_path}/"
    relative = normalized[len(doc_prefix):] if normalized.startswith(doc_prefix) else normalized

    *folders, filename = relative.split("/")

    prefix_parts: list[str] = []
    if output_root:
        prefix_parts.append(output_root)
    # Solo la primera carpeta se compara con el root.
    if folders and not (output_root and folders[0] == output_root):
        prefix_parts.extend(folders)

    folder_prefix = f"{'-'.join(prefix_parts)}-" if prefix_parts else ""
    final_name = filename if filename.startswith(folder_prefix) else f"{folder_prefix}{filename}"

    directory = os.path.join(output_dir, output_root) if output_root else output_dir
    return OutputLocation(directory=directory, filename=final_name)


def location_for(file: RemoteFile, output_dir: str) -> OutputLocation:
    """Atajo para ficheros ya etiquetados con su ruta de documentación."""

    return build_output_location(
        file.path,
        file.document_path or "",
        file.output_root,
        output_dir,
    )
