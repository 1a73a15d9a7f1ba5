"""Site layout defaults and path helpers."""

from __future__ import annotations

from pathlib import Path

SOURCE_DIRNAME = "posts"
OUTPUT_DIRNAME = "generated"
TEMPLATE_DIRNAME = "template"
POSTS_SUBDIR = "posts"

POST_TEMPLATE = "post.html"
INDEX_TEMPLATE = "index.html"
INDEX_PAGE = "index.html"

CONFIG_FILENAME = "staticblog.json"


def document_name(filename: str) -> str:
    """Return the logical post name for a source file name.

    Everything from the first dot on is dropped, so ``notes.draft.md``
    becomes ``notes``.
    """
    return filename.split(".", 1)[0]


def post_page_path(name: str) -> str:
    """Output path of a post page, relative to the output directory."""
    return f"{POSTS_SUBDIR}/{name}.html"


def resolve_under(root: Path, value: Path | str) -> Path:
    """Resolve ``value`` against ``root`` unless it is already absolute."""
    path = Path(value).expanduser()
    if path.is_absolute():
        return path
    return root / path


__all__ = [
    "SOURCE_DIRNAME",
    "OUTPUT_DIRNAME",
    "TEMPLATE_DIRNAME",
    "POSTS_SUBDIR",
    "POST_TEMPLATE",
    "INDEX_TEMPLATE",
    "INDEX_PAGE",
    "CONFIG_FILENAME",
    "document_name",
    "post_page_path",
    "resolve_under",
]
