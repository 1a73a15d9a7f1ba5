"""Serve command."""

from __future__ import annotations

from pathlib import Path

import click

from staticblog.cli.helpers import fail, load_effective_config
from staticblog.cli.types import AppEnv
from staticblog.errors import StaticBlogError


@click.command("serve")
@click.option(
    "--directory", "-d",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory to serve (default: generated)",
)
@click.option("--host", default=None, help="Host to bind (default: 127.0.0.1)")
@click.option("--port", type=int, default=None, help="Port to bind (default: 3000)")
@click.pass_obj
def serve_command(env: AppEnv, directory: Path | None, host: str | None, port: int | None) -> None:
    """Serve the generated site over HTTP."""
    from staticblog.server import serve

    try:
        config = load_effective_config(env, output_dir=directory, host=host, port=port)
        serve(config.output_dir, config.host, config.port)
    except StaticBlogError as exc:
        fail("serve", str(exc))
