"""Escritura en disco de los documentos aplanados.

Por qué está en adapters:
- El Core solo calcula `OutputLocation`; crear directorios y escribir es I/O.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from core.domain.models import OutputLocation


def empty_directory(path: Path) -> Path:
    """Deja `path` vacío (lo crea si no existe), como `fs-extra.emptyDir`."""

    path.mkdir(parents=True, exist_ok=True)
    for child in path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
    return path


def write_document(*, location: OutputLocation, content: str) -> Path:
    """Escribe `content` en UTF-8 en la ubicación calculada."""

    target = location.path
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return target
