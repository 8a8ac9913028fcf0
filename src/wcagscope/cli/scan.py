"""CLI command: wcagscope scan <url> — one-off accessibility scan."""

from __future__ import annotations

import asyncio
import json
import re
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from wcagscope.config import WcagScopeConfig
from wcagscope.scanner.models import StandardResult
from wcagscope.scanner.orchestrator import ScanOrchestrator

console = Console(stderr=True)

_URL_RE = re.compile(r"^https?://")


@click.command()
@click.argument("url")
@click.option("--full", is_flag=True, help="Attach element screenshots (slow).")
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON report.")
@click.pass_context
def scan(ctx: click.Context, url: str, full: bool, as_json: bool) -> None:
    """Scan URL against WCAG2A, WCAG2AA and WCAG2AAA."""
    if not _URL_RE.match(url):
        raise click.BadParameter("A valid URL is required", param_hint="URL")

    config = WcagScopeConfig.load(ctx.obj.get("config_path"))
    orchestrator = ScanOrchestrator.from_config(config)

    console.print(f"[bold]wcagscope[/bold] scanning [cyan]{url}[/cyan]\n")
    results = asyncio.run(orchestrator.run(url, screenshots=full))

    if as_json:
        click.echo(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        _print_table(results)

    failed = [r for r in results if not r.ok]
    if failed:
        console.print(f"\n[red]{len(failed)} standard(s) failed[/red]")
        sys.exit(1)


def _print_table(results: list[StandardResult]) -> None:
    table = Table(title="Issues", show_lines=False)
    table.add_column("Standard", style="bold")
    table.add_column("Principle", style="cyan")
    table.add_column("Errors", justify="right")
    table.add_column("Warnings", justify="right")
    table.add_column("Notices", justify="right")

    for result in results:
        if not result.ok:
            table.add_row(
                result.standard.value,
                f"[red]{escape(result.error or '')}[/red]",
                "-",
                "-",
                "-",
            )
            continue
        if not result.grouped:
            table.add_row(
                result.standard.value, "[green]No issues[/green]", "0", "0", "0"
            )
            continue
        for principle, bucket in result.grouped.items():
            table.add_row(
                result.standard.value,
                principle,
                f"[red]{len(bucket.errors)}[/red]",
                f"[yellow]{len(bucket.warnings)}[/yellow]",
                f"[blue]{len(bucket.notices)}[/blue]",
            )

    console.print(table)
