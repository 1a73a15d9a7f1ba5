import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from staticblog.config import SiteConfig
from staticblog.site.builder import SiteBuilder
from tests.helpers import FakeConverter, write_templates


@pytest.fixture
def site_root(tmp_path):
    """Site layout with templates and an empty posts/ directory."""
    root = tmp_path / "blog"
    (root / "posts").mkdir(parents=True)
    write_templates(root)
    return root


@pytest.fixture
def site_config(site_root):
    return SiteConfig().resolved(site_root)


@pytest.fixture
def fake_converter():
    return FakeConverter()


@pytest.fixture
def builder(site_config, fake_converter):
    return SiteBuilder(site_config, converter=fake_converter)


@pytest.fixture
def json_logs(capsys):
    """Route structlog to stderr as JSON and return a reader for the events."""
    import json

    import structlog

    from staticblog.lib.log import configure_logging

    configure_logging(verbose=True, json_logs=True)

    def read_events() -> list[dict]:
        err = capsys.readouterr().err
        return [json.loads(line) for line in err.splitlines() if line.startswith("{")]

    yield read_events
    structlog.reset_defaults()
