# File: tests/conftest.py
from pathlib import Path
from typing import Callable

import pytest

from spiderseek.config import InjectorConfig
from spiderseek.logger import setup_logging

SITE_ID = "26-5P1BG86"
SCRIPT = (
    '<script id="spiderseek-sdk" async '
    'src="https://spiderseekjs.com/spiderseek.js?id=26-5P1BG86"></script>'
)
PAGE = "<!DOCTYPE html>\n<html>\n<head>\n<title>Page</title>\n</head>\n<body></body>\n</html>\n"


@pytest.fixture(autouse=True)
def reset_logging():
    """
    CliRunner swaps sys.stdout; rebuild the handlers after every test so
    later tests never log into a closed stream.
    """
    yield
    setup_logging(level="INFO")


@pytest.fixture()
def write_page(tmp_path) -> Callable[[str, str], Path]:
    """
    Return a helper that writes *content* to ``site/<rel>`` and returns its path.
    """
    site = tmp_path / "site"

    def _write(rel: str, content: str = PAGE) -> Path:
        path = site / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    site.mkdir()
    return _write


@pytest.fixture()
def site_dir(tmp_path, write_page) -> Path:
    """
    Build output with a root page, nested index routes and a plain page.
    """
    write_page("index.html")
    write_page("about/index.html")
    write_page("blog/post/index.html")
    write_page("sitemap.html")
    write_page("admin/index.html")
    write_page("administration/index.html")
    write_page("assets/app.js", "console.log(1)")
    return tmp_path / "site"


@pytest.fixture()
def basic_config() -> InjectorConfig:
    return InjectorConfig(site_id=SITE_ID)
