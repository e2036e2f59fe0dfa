"""Orquestación de la extracción de documentación.

Por qué un pipeline en el Core:
- La CLI delega todo el flujo (listado, aplanado, descarga, zip) en `extract`.
- Los efectos de UI (prints, barras de progreso) quedan fuera: la UI se engancha
  con `PipelineHooks`.
- La parte remota es cualquier `DocsSource`; en tests basta una fuente en memoria.

Todos los avisos (rutas inexistentes, colisiones) pasan por `warn` y acaban en
`ExtractionResult.warnings` y en el hook `warning`.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from adapters.fs_writer import empty_directory, write_document
from adapters.zip_archiver import create_zip_archive, default_archive_path
from core.config import AppSettings
from core.domain.models import (
    DocumentPathConfig,
    ExtractionResult,
    OutputLocation,
    RemoteFile,
    RepoRef,
)
from core.interfaces.docs_source import DocsSource
from core.logging_utils import get_logger
from core.services.output_layout import location_for, path_config_for


logger = get_logger("pipeline")


@dataclass(frozen=True)
class ExtractionOptions:
    """Parámetros de una ejecución, fijos tras parsear las opciones de la CLI."""

    repo: RepoRef
    document_paths: tuple[str, ...] = ("docs",)
    output_dir: str = "./output"
    create_zip: bool = False
    ref: str | None = None


@dataclass
class PipelineHooks:
    """Callbacks opcionales para la UI (progreso, avisos)."""

    warning: Callable[[str], None] | None = None
    listing_start: Callable[[str], None] | None = None
    download_start: Callable[[int], None] | None = None
    download_progress: Callable[[int, int, str], None] | None = None
    archive_start: Callable[[], None] | None = None


@dataclass
class PlannedWrite:
    file: RemoteFile
    location: OutputLocation


@dataclass
class WritePlan:
    writes: list[PlannedWrite] = field(default_factory=list)
    collisions: list[str] = field(default_factory=list)


def build_path_configs(document_paths: Sequence[str]) -> list[DocumentPathConfig]:
    """Una config por entrada de `--paths`; los duplicados tras normalizar se descartan."""

    configs: list[DocumentPathConfig] = []
    seen: set[str] = set()
    for raw in document_paths:
        config = path_config_for(raw)
        if config.document_path in seen:
            continue
        seen.add(config.document_path)
        configs.append(config)
    return configs


def plan_writes(files: Sequence[RemoteFile], output_dir: str) -> WritePlan:
    """Calcula todos los destinos antes de descargar. Gana el primer fichero."""

    plan = WritePlan()
    claimed: dict[Path, str] = {}
    for file in files:
        location = location_for(file, output_dir)
        key = location.path
        if key in claimed:
            plan.collisions.append(file.path)
            continue
        claimed[key] = file.path
        plan.writes.append(PlannedWrite(file=file, location=location))
    return plan


async def collect_files(
    *,
    source: DocsSource,
    configs: Sequence[DocumentPathConfig],
    hooks: PipelineHooks,
    warn: Callable[[str], None] | None = None,
) -> list[RemoteFile]:
    files: list[RemoteFile] = []
    seen: set[str] = set()
    for config in configs:
        if hooks.listing_start:
            hooks.listing_start(config.document_path)
        async for remote in source.iter_files(config.document_path, on_warning=warn):
            # Rutas solapadas (p.ej. "docs" y "docs/api") no descargan dos veces.
            if remote.path in seen:
                continue
            seen.add(remote.path)
            files.append(remote.with_origin(config))
        logger.info("listed %s: %d files so far", config.document_path or "/", len(files))
    return files


async def extract(
    *,
    settings: AppSettings,
    options: ExtractionOptions,
    source: DocsSource,
    hooks: PipelineHooks | None = None,
) -> ExtractionResult:
    hooks = hooks or PipelineHooks()
    warnings: list[str] = []

    def warn(message: str) -> None:
        warnings.append(message)
        # Nivel info: el aviso visible lo pinta el hook, no el log.
        logger.info(message)
        if hooks.warning:
            hooks.warning(message)

    configs = build_path_configs(options.document_paths)
    files = await collect_files(source=source, configs=configs, hooks=hooks, warn=warn)

    result = ExtractionResult(
        repo=options.repo,
        output_dir=options.output_dir,
        files_found=len(files),
        warnings=list(warnings),
    )
    if not files:
        return result

    output_path = Path(options.output_dir)
    empty_directory(output_path)
    logger.info("output directory cleaned: %s", output_path.resolve())

    plan = plan_writes(files, options.output_dir)
    for path in plan.collisions:
        warn(f'Skipping "{path}": another file already maps to the same output name.')

    total = len(plan.writes)
    if hooks.download_start:
        hooks.download_start(total)

    sem = asyncio.Semaphore(max(1, settings.max_concurrency))
    done = 0

    async def download_one(item: PlannedWrite) -> Path:
        nonlocal done
        async with sem:
            content = await source.fetch_text(item.file)
        written = write_document(location=item.location, content=content)
        done += 1
        logger.debug("wrote %s -> %s", item.file.path, written)
        if hooks.download_progress:
            hooks.download_progress(done, total, item.file.path)
        return written

    written = await asyncio.gather(*(download_one(item) for item in plan.writes))

    archive_path: Path | None = None
    if options.create_zip:
        if hooks.archive_start:
            hooks.archive_start()
        archive_path = create_zip_archive(
            source_dir=output_path,
            output_path=default_archive_path(output_path),
        )
        logger.info("archive created: %s", archive_path)

    return result.model_copy(
        update={
            "files_written": list(written),
            "skipped_collisions": plan.collisions,
            "archive_path": archive_path,
            "warnings": warnings,
        }
    )
