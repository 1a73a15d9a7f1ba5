"""CLI entrypoint."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from staticblog.cli.commands import build_command, init_command, serve_command
from staticblog.cli.types import AppEnv
from staticblog.lib.log import configure_logging
from staticblog.version import STATICBLOG_VERSION


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Path to staticblog.json")
@click.version_option(STATICBLOG_VERSION, prog_name="staticblog")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, json_logs: bool, config_path: Optional[Path]) -> None:
    """Build a static blog with an external converter and serve it."""
    configure_logging(verbose=verbose, json_logs=json_logs)
    ctx.obj = AppEnv(config_path=config_path, verbose=verbose)


cli.add_command(build_command)
cli.add_command(serve_command)
cli.add_command(init_command)


def build_main() -> None:
    """Entry point for ``staticblog-build``."""
    cli.main(args=["build", *sys.argv[1:]], prog_name="staticblog-build")


def serve_main() -> None:
    """Entry point for ``staticblog-serve``."""
    cli.main(args=["serve", *sys.argv[1:]], prog_name="staticblog-serve")
