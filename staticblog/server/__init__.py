"""HTTP server for a built site."""

from staticblog.server.app import check_directory, create_app, serve

__all__ = ["create_app", "check_directory", "serve"]
