"""Starter layout for a new blog."""

from __future__ import annotations

from pathlib import Path

from staticblog.errors import OutputError
from staticblog.lib.log import get_logger
from staticblog.paths import INDEX_TEMPLATE, POST_TEMPLATE, SOURCE_DIRNAME, TEMPLATE_DIRNAME

logger = get_logger(__name__)

# Default page template; the converted document lands in {{ body }}
POST_TEMPLATE_SOURCE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }}</title>
    <style>
        body { max-width: 720px; margin: 0 auto; padding: 2rem 1rem; font-family: -apple-system, "Segoe UI", Roboto, sans-serif; line-height: 1.6; }
        nav a { text-decoration: none; }
        pre { overflow-x: auto; }
    </style>
</head>
<body>
    <nav><a href="../index.html">&larr; All posts</a></nav>
    <article>
{{ body }}
    </article>
</body>
</html>
"""

# Default index template; receives the ordered list of posts
INDEX_TEMPLATE_SOURCE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Posts</title>
    <style>
        body { max-width: 720px; margin: 0 auto; padding: 2rem 1rem; font-family: -apple-system, "Segoe UI", Roboto, sans-serif; line-height: 1.6; }
        ul { list-style: none; padding: 0; }
        li { margin: 0.5rem 0; }
    </style>
</head>
<body>
    <h1>Posts</h1>
    <ul>
    {%- for post in posts %}
        <li><a href="{{ post.path }}">{{ post.title }}</a></li>
    {%- endfor %}
    </ul>
</body>
</html>
"""

SAMPLE_POST = """# Hello

This is your first post. Edit `posts/hello.md`, then run:

    staticblog build
    staticblog serve
"""


def starter_files(root: Path) -> dict[Path, str]:
    return {
        root / TEMPLATE_DIRNAME / POST_TEMPLATE: POST_TEMPLATE_SOURCE,
        root / TEMPLATE_DIRNAME / INDEX_TEMPLATE: INDEX_TEMPLATE_SOURCE,
        root / SOURCE_DIRNAME / "hello.md": SAMPLE_POST,
    }


def init_site(root: Path, force: bool = False) -> list[Path]:
    """Write the starter templates and a sample post under ``root``.

    Existing files are kept unless ``force`` is set.

    Returns:
        Paths that were written
    """
    written: list[Path] = []
    for path, content in starter_files(root).items():
        if path.exists() and not force:
            logger.info("Keeping existing file", path=str(path))
            continue
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Cannot write {path}: {exc}") from exc
        written.append(path)
    return written


__all__ = ["init_site", "starter_files", "POST_TEMPLATE_SOURCE", "INDEX_TEMPLATE_SOURCE"]
