"""CLI command: wcagscope server — start the HTTP API."""

from __future__ import annotations

import click
import uvicorn
from rich.console import Console

from wcagscope.config import WcagScopeConfig

console = Console(stderr=True)


@click.command()
@click.option("--host", default=None, help="Interface to bind (default: 127.0.0.1).")
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to listen on (default: 3200, or $PORT).",
)
@click.pass_context
def server(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Start the wcagscope HTTP API."""
    config = WcagScopeConfig.load(ctx.obj.get("config_path"))
    config.verbose = ctx.obj.get("verbose", False)
    if host is not None:
        config.web_host = host
    if port is not None:
        config.web_port = port

    console.print(
        f"[bold]wcagscope[/bold] starting on "
        f"[cyan]http://{config.web_host}:{config.web_port}[/cyan]"
    )
    if config.static_dir.is_dir():
        console.print(f"  [dim]Serving static files from {config.static_dir}[/dim]\n")

    from wcagscope.web.app import create_app

    app = create_app(config)
    uvicorn.run(
        app,
        host=config.web_host,
        port=config.web_port,
        log_level="debug" if config.verbose else "info",
    )
