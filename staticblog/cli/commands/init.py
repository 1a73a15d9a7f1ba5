"""Starter site command."""

from __future__ import annotations

from pathlib import Path

import click

from staticblog.cli.helpers import fail
from staticblog.cli.types import AppEnv
from staticblog.errors import StaticBlogError


@click.command("init")
@click.argument("root", type=click.Path(file_okay=False, path_type=Path), default=".")
@click.option("--force", is_flag=True, help="Overwrite existing templates and sample post")
@click.pass_obj
def init_command(env: AppEnv, root: Path, force: bool) -> None:
    """Create posts/ and template/ with starter files."""
    from staticblog.site import init_site

    try:
        written = init_site(root, force=force)
    except StaticBlogError as exc:
        fail("init", str(exc))

    if not written:
        click.echo("Nothing to do; use --force to overwrite existing files.")
        return
    for path in written:
        click.echo(f"Created {path}")
