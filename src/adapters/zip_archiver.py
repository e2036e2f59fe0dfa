"""Archivo zip del directorio de salida.

Nombre por defecto: `<padre del directorio de salida>/<nombre>.zip`, es decir,
el zip queda al lado del directorio y nunca dentro de él.
"""

from __future__ import annotations

import zipfile
from pathlib import Path


def default_archive_path(output_dir: Path) -> Path:
    resolved = output_dir.resolve()
    return resolved.parent / f"{resolved.name}.zip"


def create_zip_archive(*, source_dir: Path, output_path: Path) -> Path:
    """Comprime el contenido de `source_dir` (rutas relativas a él)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(
        output_path,
        "w",
        compression=zipfile.ZIP_DEFLATED,
        compresslevel=9,
    ) as archive:
        for path in sorted(source_dir.rglob("*")):
            if path.is_file():
                archive.write(path, arcname=path.relative_to(source_dir).as_posix())
    return output_path
