"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `extract` y `doctor`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from core.config import APP_VERSION
from core.domain.models import ExtractionResult


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    """

    title = Text("GDE", style="bold cyan")
    subtitle = Text(f"GitHub Docs Extractor v{APP_VERSION} • Markdown for RAG", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_success(console: Console) -> None:
    console.print(Panel(Text("Success!", style="bold green", justify="center"), border_style="green"))


def print_rate_limit_help(console: Console) -> None:
    """Explica cómo salir del límite de 60 req/h sin token."""

    body = Text()
    body.append(
        "You have hit the GitHub API rate limit for unauthenticated requests (60 requests/hour).\n",
        style="yellow",
    )
    body.append(
        "To fix this, create a Personal Access Token (PAT) and set it as an environment variable:\n",
        style="yellow",
    )
    body.append('  export GITHUB_TOKEN="your_token_here"\n', style="cyan")
    body.append(
        "This raises the limit to 5,000 requests/hour and is recommended for all uses.",
        style="yellow",
    )
    console.print(Panel(body, title=Text("API Rate Limit Exceeded", style="bold yellow"), border_style="yellow"))


def build_download_progress(console: Console) -> Progress:
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def build_summary_table(result: ExtractionResult) -> Table:
    """Tabla resumen de una extracción."""

    table = Table(title="Extraction Summary")
    table.add_column("Item", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Repository", result.repo.full_name)
    table.add_row("Files found", str(result.files_found))
    table.add_row("Files written", str(len(result.files_written)))
    if result.skipped_collisions:
        table.add_row("Skipped (name collision)", str(len(result.skipped_collisions)))
    table.add_row("Output directory", result.output_dir)
    if result.archive_path:
        table.add_row("Zip archive", str(result.archive_path))
    return table
