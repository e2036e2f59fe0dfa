"""CLI principal (Typer).

Por qué Typer + Rich:
- Typer da parsing/ayuda tipados a partir de la firma de cada comando.
- Rich se encarga de banner, spinners, barra de progreso y tablas.

La CLI solo traduce opciones a `ExtractionOptions` y conecta hooks de UI; el
flujo vive en `core.services.extraction_pipeline`.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.progress import TaskID

from adapters.github_contents import GitHubContentsSource
from cli import doctor
from cli.ui_components import (
    build_download_progress,
    build_summary_table,
    print_banner,
    print_rate_limit_help,
    print_success,
)
from core.config import APP_VERSION, AppSettings
from core.domain.models import ExtractionResult
from core.errors import ExtractorError, InvalidRepoUrlError, RateLimitError
from core.logging_utils import setup_logging
from core.services.extraction_pipeline import ExtractionOptions, PipelineHooks, extract
from core.services.repo_url import parse_repo_url


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Download .md/.mdx docs from a GitHub repository into a flat, RAG-friendly layout.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

_PATH_SEPARATOR = ","


def split_paths(values: list[str] | None) -> list[str]:
    """`--paths` acepta repetición y listas separadas por comas.

    Los espacios se conservan: hay carpetas de repositorio que los llevan.
    """

    out: list[str] = []
    for value in values or []:
        out.extend(p.strip() for p in value.split(_PATH_SEPARATOR) if p.strip())
    return out


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gde v{APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """GitHub Docs Extractor."""


async def _run_extraction(settings: AppSettings, options: ExtractionOptions) -> ExtractionResult:
    progress = build_download_progress(_console)
    task_id: TaskID | None = None

    def on_warning(message: str) -> None:
        _console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def on_listing(path: str) -> None:
        _console.print(f"Fetching files from [green]{escape(options.repo.full_name)}/{escape(path)}[/green]...")

    def on_download_start(total: int) -> None:
        nonlocal task_id
        _console.print(
            f"[bright_blue]Output directory cleaned. Files will be saved to: "
            f"{Path(options.output_dir).resolve()}[/bright_blue]"
        )
        progress.start()
        task_id = progress.add_task("Downloading files...", total=total)

    def on_download_progress(done: int, total: int, path: str) -> None:
        if task_id is not None:
            progress.update(task_id, completed=done, description=f"Downloading [cyan]{escape(path)}[/cyan]")

    def on_archive_start() -> None:
        progress.stop()
        _console.print("Creating zip archive...")

    hooks = PipelineHooks(
        warning=on_warning,
        listing_start=on_listing,
        download_start=on_download_start,
        download_progress=on_download_progress,
        archive_start=on_archive_start,
    )

    try:
        async with GitHubContentsSource(
            options.repo,
            settings=settings,
            ref=options.ref,
        ) as source:
            return await extract(settings=settings, options=options, source=source, hooks=hooks)
    finally:
        progress.stop()


@app.command(name="extract")
def extract_command(
    repo: str = typer.Option(
        ...,
        "--repo",
        "-r",
        help="GitHub repository URL (e.g. https://github.com/facebook/react).",
    ),
    out: str | None = typer.Option(
        None,
        "--out",
        "-o",
        help="Destination directory for downloaded files (default: ./output).",
    ),
    paths: list[str] | None = typer.Option(
        None,
        "--paths",
        "-p",
        help="Documentation folder(s) to scan; repeat or separate with commas (default: docs).",
    ),
    create_zip: bool = typer.Option(False, "--zip", help="Create a zip archive of the output directory."),
    ref: str | None = typer.Option(None, "--ref", help="Branch, tag or commit (default branch if omitted)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Extract and flatten documentation files from a GitHub repository."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    print_banner(_console)

    try:
        repo_ref = parse_repo_url(repo)
    except InvalidRepoUrlError as exc:
        _err_console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        raise typer.Exit(code=1)

    options = ExtractionOptions(
        repo=repo_ref,
        document_paths=tuple(split_paths(paths) or [settings.default_docs_path]),
        output_dir=out or settings.default_output_dir,
        create_zip=create_zip,
        ref=ref,
    )

    _console.print("[bold yellow]Starting GitHub Docs Extractor...[/bold yellow]")
    try:
        result = asyncio.run(_run_extraction(settings, options))
    except RateLimitError as exc:
        _err_console.print(f"[bold red]An error occurred:[/bold red] {escape(str(exc))}")
        print_rate_limit_help(_err_console)
        raise typer.Exit(code=1)
    except (ExtractorError, httpx.HTTPError, OSError) as exc:
        _err_console.print(f"[bold red]An error occurred:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    if result.files_found == 0:
        _console.print("[yellow]No .md or .mdx files found in any of the specified paths.[/yellow]")
        return

    _console.print(build_summary_table(result))
    if result.archive_path:
        _console.print(f"[green]Zip archive created at:[/green] {result.archive_path}")
    _console.print("[bold yellow]Operation completed![/bold yellow]")
    print_success(_console)


def run() -> None:
    app()
