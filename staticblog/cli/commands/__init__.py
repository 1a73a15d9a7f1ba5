"""CLI subcommands."""

from staticblog.cli.commands.build import build_command
from staticblog.cli.commands.init import init_command
from staticblog.cli.commands.serve import serve_command

__all__ = ["build_command", "init_command", "serve_command"]
