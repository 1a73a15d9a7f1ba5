"""Static site builder.

Turns a directory of source documents into HTML pages plus an index page:

- posts/<name>.html: one page per document, the converted fragment wrapped
  in the ``post.html`` template
- index.html: the ``index.html`` template rendered with every Post
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import jinja2
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from staticblog.config import SiteConfig
from staticblog.converter import Converter, PandocConverter
from staticblog.errors import ConverterError, OutputError, TemplateError
from staticblog.lib.log import bind_context, get_logger
from staticblog.paths import (
    INDEX_PAGE,
    INDEX_TEMPLATE,
    POST_TEMPLATE,
    POSTS_SUBDIR,
    document_name,
    post_page_path,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Post:
    """A rendered page, as listed on the index."""

    path: str
    title: str


@dataclass
class BuildResult:
    posts: list[Post] = field(default_factory=list)
    index_path: Path | None = None


class SiteBuilder:
    """Build a static blog from a source directory.

    Every run reprocesses all documents in listing order. The first failing
    document aborts the build before the index is rendered; pages written
    earlier in the run are left in place.
    """

    def __init__(
        self,
        config: SiteConfig,
        converter: Converter | None = None,
    ) -> None:
        """Initialize site builder.

        Args:
            config: Site configuration with resolved directories
            converter: Document converter, defaults to pandoc from config
        """
        self.config = config
        self.source_dir = Path(config.source_dir)
        self.output_dir = Path(config.output_dir)
        self.template_dir = Path(config.template_dir)
        self.converter = converter or PandocConverter(
            command=config.converter,
            input_format=config.input_format,
            timeout=config.converter_timeout,
        )

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            keep_trailing_newline=True,
        )

    @property
    def posts_dir(self) -> Path:
        return self.output_dir / POSTS_SUBDIR

    def build(self, clean: bool = False) -> BuildResult:
        """Build the complete site.

        Args:
            clean: Remove previously generated post pages before building.

        Returns:
            BuildResult with the ordered Posts and the index path
        """
        self._ensure_dir(self.output_dir)
        if clean:
            self._clean_posts()

        posts: list[Post] = []
        for name, source in self.list_sources():
            posts.append(self.build_post(name, source))

        index_path = self.build_index(posts)
        logger.info("Site built", posts=len(posts), output=str(self.output_dir))
        return BuildResult(posts=posts, index_path=index_path)

    def list_sources(self) -> list[tuple[str, Path]]:
        """Return ``(name, path)`` pairs for every source document.

        A missing or unreadable source directory is not fatal: it is logged
        and yields no documents.
        """
        try:
            entries = sorted(self.source_dir.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            logger.warning("Cannot read source directory", path=str(self.source_dir), error=str(exc))
            return []

        sources: list[tuple[str, Path]] = []
        for entry in entries:
            if entry.name.startswith(".") or not entry.is_file():
                continue
            sources.append((document_name(entry.name), entry))
        return sources

    def list_documents(self) -> list[str]:
        """Return the logical names of all source documents, in build order."""
        return [name for name, _ in self.list_sources()]

    def build_post(self, name: str, source: Path | None = None) -> Post:
        """Convert one document and write its page.

        Raises:
            ConverterError: the converter failed on the document
            TemplateError: the post template is missing or failed to render
            OutputError: the page could not be written
        """
        if source is None:
            source = self._find_source(name)

        with bind_context(post=name):
            logger.info("Generating post", source=str(source))
            try:
                fragment = self.converter.convert(source)
            except ConverterError as exc:
                logger.error("Converter failed", error=str(exc))
                raise

            post = Post(path=post_page_path(name), title=name)
            html = self._render(
                POST_TEMPLATE,
                body=Markup(fragment),
                title=post.title,
                post=post,
            )
            self._ensure_dir(self.posts_dir)
            self._write(self.output_dir / post.path, html)
        return post

    def build_index(self, posts: list[Post]) -> Path:
        """Render the index page listing ``posts`` in the given order."""
        logger.info("Generating index", posts=len(posts))
        html = self._render(INDEX_TEMPLATE, posts=posts)
        target = self.output_dir / INDEX_PAGE
        self._write(target, html)
        return target

    def _find_source(self, name: str) -> Path:
        for candidate, path in self.list_sources():
            if candidate == name:
                return path
        return self.source_dir / f"{name}.md"

    def _render(self, template_name: str, **context: object) -> str:
        try:
            template = self.env.get_template(template_name)
            return template.render(**context)
        except jinja2.TemplateNotFound as exc:
            logger.error("Template not found", template=template_name, path=str(self.template_dir))
            raise TemplateError(f"Template {template_name} not found in {self.template_dir}") from exc
        except jinja2.TemplateError as exc:
            logger.error("Error rendering template", template=template_name, error=str(exc))
            raise TemplateError(f"Error rendering {template_name}: {exc}") from exc
        except Exception as exc:
            # runtime errors raised inside the template, or an undecodable file
            logger.error("Error rendering template", template=template_name, error=repr(exc))
            raise TemplateError(f"Error rendering {template_name}: {exc!r}") from exc

    def _write(self, target: Path, html: str) -> None:
        try:
            target.write_text(html, encoding="utf-8")
        except OSError as exc:
            logger.error("Error creating file", path=str(target), error=str(exc))
            raise OutputError(f"Cannot write {target}: {exc}") from exc

    def _ensure_dir(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Error creating directory", path=str(path), error=str(exc))
            raise OutputError(f"Cannot create {path}: {exc}") from exc

    def _clean_posts(self) -> None:
        if not self.posts_dir.is_dir():
            return
        for page in sorted(self.posts_dir.glob("*.html")):
            try:
                page.unlink()
            except OSError as exc:
                logger.error("Error removing file", path=str(page), error=str(exc))
                raise OutputError(f"Cannot remove {page}: {exc}") from exc
            logger.debug("Removed stale page", path=str(page))


__all__ = ["SiteBuilder", "Post", "BuildResult"]
