"""Site build command."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from staticblog.cli.helpers import fail, load_effective_config
from staticblog.errors import StaticBlogError

if TYPE_CHECKING:
    from staticblog.cli.types import AppEnv


@click.command("build")
@click.option(
    "--source", "-s",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory of source documents (default: posts)",
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output directory for the generated site (default: generated)",
)
@click.option(
    "--templates", "-t",
    type=click.Path(path_type=Path),
    default=None,
    help="Directory holding post.html and index.html (default: template)",
)
@click.option("--converter", default=None, help="Converter command (default: pandoc)")
@click.option("--clean", is_flag=True, help="Remove previously generated post pages first")
@click.pass_obj
def build_command(
    env: AppEnv,
    source: Path | None,
    output: Path | None,
    templates: Path | None,
    converter: str | None,
    clean: bool,
) -> None:
    """Convert every source document and render the index page.

    \b
    Examples:
        staticblog build                  # posts/ -> generated/
        staticblog build -o ./public      # Build to custom directory
        staticblog build --clean          # Drop old post pages first
    """
    from staticblog.site import SiteBuilder

    try:
        config = load_effective_config(
            env,
            source_dir=source,
            output_dir=output,
            template_dir=templates,
            converter=converter,
        )
        result = SiteBuilder(config).build(clean=clean)
    except StaticBlogError as exc:
        fail("build", str(exc))

    click.echo(f"Site generated: {len(result.posts)} posts")
    click.echo(f"Output: {config.output_dir}")


__all__ = ["build_command"]
