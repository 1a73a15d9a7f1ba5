"""Static site generation.

This package turns a directory of documents into a static blog:
- One HTML page per document, converted by an external tool
- An index page listing every post
- A starter layout for new sites
"""

from staticblog.site.builder import BuildResult, Post, SiteBuilder
from staticblog.site.scaffold import init_site

__all__ = ["SiteBuilder", "Post", "BuildResult", "init_site"]
