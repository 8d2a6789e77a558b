from __future__ import annotations

import logging
from typing import Optional

import typer
from rich import print as rprint
from rich.logging import RichHandler
from rich.markup import escape

from procexporter.config import get_config

USAGE = "Usage: procexporter --process <process_name>"

app = typer.Typer(add_completion=False, help="Prometheus exporter for processes matched by command line.")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=False)],
    )


@app.command()
def serve(
    process: str = typer.Option("", "--process", "-p", help="Name of the process to monitor"),
    host: Optional[str] = typer.Option(None, help="Listen address"),
    port: Optional[int] = typer.Option(None, help="Listen port"),
    log_level: Optional[str] = typer.Option(None, help="Log level"),
):
    """Serve /metrics for processes whose command line contains PROCESS."""
    if not process:
        typer.echo(USAGE, err=True)
        raise typer.Exit(1)

    cfg = get_config()
    h = host or cfg.host
    p = port or cfg.port
    setup_logging(log_level or cfg.log_level)

    from procexporter.api.main import create_app
    import uvicorn

    exporter = create_app(process, cfg=cfg)
    rprint(f"Starting exporter on :{p}/metrics for process '{escape(process)}'")
    uvicorn.run(exporter, host=h, port=p, log_config=None)
