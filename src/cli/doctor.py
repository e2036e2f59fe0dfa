"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.github_contents import fetch_rate_limit
from core.config import AppSettings

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_rate_limit(settings: AppSettings) -> tuple[bool, str]:
    try:
        core = await fetch_rate_limit(settings)
    except Exception as exc:
        return False, str(exc)

    remaining = core.get("remaining")
    limit = core.get("limit")
    reset = core.get("reset")
    detail = f"{remaining}/{limit} requests left"
    if isinstance(reset, int):
        reset_at = datetime.fromtimestamp(reset, tz=timezone.utc).isoformat(timespec="seconds")
        detail += f", resets at {reset_at}"
    return bool(remaining), detail


def _check_output_dir(path: Path) -> tuple[bool, str]:
    """Best-effort: writable directory (or creatable parent)."""

    target = path if path.exists() else path.resolve().parent
    while not target.exists() and target != target.parent:
        target = target.parent
    if not target.is_dir():
        return False, f"{target} is not a directory"
    if not os.access(target, os.W_OK):
        return False, f"{target} is not writable"
    try:
        with tempfile.NamedTemporaryFile(dir=target, prefix=".gde_doctor_"):
            pass
    except OSError as exc:
        return False, str(exc)
    return True, str(path.resolve())


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[bold red]Invalid configuration:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    table = Table(title="GDE Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.github_token:
        table.add_row("GitHub token", "OK", "Authenticated requests (5,000/hour)")
    else:
        table.add_row("GitHub token", "OPTIONAL", "No GITHUB_TOKEN set -> 60 requests/hour")
    table.add_row("API base_url", "OK", settings.github_api_url)

    # Connectivity + cuota (GET /rate_limit no consume cuota)
    ok_api, detail_api = asyncio.run(_check_rate_limit(settings))
    table.add_row("GitHub API rate limit", "OK" if ok_api else "FAIL", detail_api)

    ok_out, detail_out = _check_output_dir(Path(settings.default_output_dir))
    table.add_row("Output directory", "OK" if ok_out else "FAIL", detail_out)

    _console.print(table)

    if not ok_api and not settings.github_token:
        _console.print(
            '\n[yellow]Note:[/yellow] set a token with `export GITHUB_TOKEN="your_token_here"` '
            "to raise the rate limit."
        )
