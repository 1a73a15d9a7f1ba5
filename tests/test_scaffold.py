"""Tests for the starter site layout."""

from __future__ import annotations

from staticblog.config import SiteConfig
from staticblog.site import SiteBuilder, init_site
from tests.helpers import FakeConverter


def test_init_writes_starter_files(tmp_path):
    written = init_site(tmp_path)

    assert sorted(p.relative_to(tmp_path).as_posix() for p in written) == [
        "posts/hello.md",
        "template/index.html",
        "template/post.html",
    ]


def test_init_keeps_existing_files(tmp_path):
    (tmp_path / "template").mkdir()
    custom = tmp_path / "template" / "post.html"
    custom.write_text("custom", encoding="utf-8")

    written = init_site(tmp_path)

    assert custom not in written
    assert custom.read_text(encoding="utf-8") == "custom"


def test_init_force_overwrites(tmp_path):
    init_site(tmp_path)
    (tmp_path / "posts" / "hello.md").write_text("edited", encoding="utf-8")

    written = init_site(tmp_path, force=True)

    assert len(written) == 3
    assert "edited" not in (tmp_path / "posts" / "hello.md").read_text(encoding="utf-8")


def test_starter_site_builds(tmp_path):
    init_site(tmp_path)
    builder = SiteBuilder(SiteConfig().resolved(tmp_path), converter=FakeConverter())

    result = builder.build()

    assert [post.title for post in result.posts] == ["hello"]
    index = (tmp_path / "generated" / "index.html").read_text(encoding="utf-8")
    assert '<a href="posts/hello.html">hello</a>' in index
    page = (tmp_path / "generated" / "posts" / "hello.html").read_text(encoding="utf-8")
    assert "<p># Hello</p>" in page
    assert '<a href="../index.html">' in page
