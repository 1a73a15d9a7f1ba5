"""staticblog - a minimal static blog generator.

Converts a directory of documents to HTML with an external converter
(pandoc by default), renders each through a page template, builds an
index page and serves the result over HTTP.

Example:
    from pathlib import Path

    from staticblog import SiteBuilder, SiteConfig

    config = SiteConfig().resolved(Path("~/blog").expanduser())
    result = SiteBuilder(config).build()
    for post in result.posts:
        print(post.title, post.path)
"""

from staticblog.config import SiteConfig, load_config
from staticblog.converter import Converter, PandocConverter
from staticblog.errors import StaticBlogError
from staticblog.site import BuildResult, Post, SiteBuilder

__all__ = [
    "SiteBuilder",
    "SiteConfig",
    "Post",
    "BuildResult",
    "Converter",
    "PandocConverter",
    "StaticBlogError",
    "load_config",
]
