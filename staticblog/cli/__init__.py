"""Command line interface."""

from staticblog.cli.click_app import build_main, cli, serve_main

__all__ = ["cli", "build_main", "serve_main"]
