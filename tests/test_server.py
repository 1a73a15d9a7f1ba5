"""Tests for the static file server app."""

from __future__ import annotations

import sys
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from staticblog.errors import ServeError
from staticblog.server import check_directory, create_app, serve


@pytest.fixture
def generated(tmp_path):
    root = tmp_path / "generated"
    (root / "posts").mkdir(parents=True)
    (root / "index.html").write_text("<html><body>index</body></html>\n", encoding="utf-8")
    (root / "posts" / "a.html").write_text("<html><body>a</body></html>\n", encoding="utf-8")
    return root


@pytest.fixture
def client(generated):
    return TestClient(create_app(generated))


class TestStaticApp:
    def test_root_serves_index(self, client, generated):
        response = client.get("/")

        assert response.status_code == 200
        assert response.content == (generated / "index.html").read_bytes()

    def test_post_page(self, client, generated):
        response = client.get("/posts/a.html")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.content == (generated / "posts" / "a.html").read_bytes()

    def test_unknown_path(self, client):
        assert client.get("/posts/missing.html").status_code == 404

    def test_no_api_docs_routes(self, client):
        assert client.get("/docs").status_code == 404


class TestStartup:
    def test_missing_directory(self, tmp_path):
        with pytest.raises(ServeError, match="does not exist"):
            check_directory(tmp_path / "generated")

    def test_file_instead_of_directory(self, tmp_path):
        path = tmp_path / "generated"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ServeError, match="not a directory"):
            create_app(path)

    def test_serve_does_not_start_without_directory(self, tmp_path):
        mock_uvicorn = MagicMock()
        with patch.dict(sys.modules, {"uvicorn": mock_uvicorn}):
            with pytest.raises(ServeError):
                serve(tmp_path / "generated", "127.0.0.1", 3000)

        mock_uvicorn.run.assert_not_called()

    def test_serve_runs_uvicorn(self, generated):
        mock_uvicorn = MagicMock()
        with patch.dict(sys.modules, {"uvicorn": mock_uvicorn}):
            serve(generated, "0.0.0.0", 3000)

        args, kwargs = mock_uvicorn.run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 3000
