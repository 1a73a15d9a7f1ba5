"""Shared test helpers: fake converter and site layout builders."""

from __future__ import annotations

import html
from pathlib import Path

from staticblog.errors import ConverterError

POST_TEMPLATE = """<html><head><title>{{ title }}</title></head>
<body>{{ body }}</body></html>
"""

INDEX_TEMPLATE = """<html><body><ul>
{%- for post in posts %}
<li><a href="{{ post.path }}">{{ post.title }}</a></li>
{%- endfor %}
</ul></body></html>
"""


class FakeConverter:
    """Deterministic stand-in for pandoc.

    Wraps each non-empty source line in <p> tags. File names listed in
    ``fail_on`` raise ConverterError the way a non-zero pandoc exit would.
    """

    def __init__(self, fail_on: tuple[str, ...] = ()) -> None:
        self.fail_on = set(fail_on)
        self.calls: list[Path] = []

    def convert(self, source: Path) -> str:
        self.calls.append(source)
        if source.name in self.fail_on:
            raise ConverterError(f"Converter exited with status 64 on {source}", source=source, returncode=64)
        lines = source.read_text(encoding="utf-8").splitlines()
        return "\n".join(f"<p>{html.escape(line)}</p>" for line in lines if line.strip())


def write_templates(site_root: Path, post: str = POST_TEMPLATE, index: str = INDEX_TEMPLATE) -> Path:
    template_dir = site_root / "template"
    template_dir.mkdir(parents=True, exist_ok=True)
    (template_dir / "post.html").write_text(post, encoding="utf-8")
    (template_dir / "index.html").write_text(index, encoding="utf-8")
    return template_dir


def write_posts(site_root: Path, posts: dict[str, str]) -> Path:
    source_dir = site_root / "posts"
    source_dir.mkdir(parents=True, exist_ok=True)
    for filename, text in posts.items():
        (source_dir / filename).write_text(text, encoding="utf-8")
    return source_dir


def snapshot(directory: Path) -> dict[str, bytes]:
    """Map every file under ``directory`` to its bytes."""
    return {
        str(path.relative_to(directory)): path.read_bytes()
        for path in sorted(directory.rglob("*"))
        if path.is_file()
    }
