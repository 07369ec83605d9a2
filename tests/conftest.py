import sys
from pathlib import Path
from typing import Callable

import pytest
from bs4 import BeautifulSoup
from lxml import etree, html

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

HTML5_DOCTYPE = "<!DOCTYPE html>"
HTML4_DOCTYPE = (
    '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN" '
    '"http://www.w3.org/TR/html4/strict.dtd">'
)


def _page(doctype: str, body: str) -> str:
    return f"{doctype}<html><head><title>t</title></head><body>{body}</body></html>"


@pytest.fixture
def html5_soup() -> Callable[[str], BeautifulSoup]:
    """Build an HTML5 BeautifulSoup document around ``body``."""

    def build(body: str = "") -> BeautifulSoup:
        return BeautifulSoup(_page(HTML5_DOCTYPE, body), "html.parser")

    return build


@pytest.fixture
def legacy_soup() -> Callable[[str], BeautifulSoup]:
    """Build an HTML 4.01 BeautifulSoup document around ``body``."""

    def build(body: str = "") -> BeautifulSoup:
        return BeautifulSoup(_page(HTML4_DOCTYPE, body), "html.parser")

    return build


@pytest.fixture
def html5_tree() -> Callable[[str], etree._ElementTree]:
    """Build an HTML5 lxml tree around ``body``."""

    def build(body: str = "") -> etree._ElementTree:
        return html.document_fromstring(_page(HTML5_DOCTYPE, body)).getroottree()

    return build


@pytest.fixture
def legacy_tree() -> Callable[[str], etree._ElementTree]:
    def build(body: str = "") -> etree._ElementTree:
        return html.document_fromstring(_page(HTML4_DOCTYPE, body)).getroottree()

    return build


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """Keep local INPUTID_* variables and config files out of the tests.

    Each variable is registered with monkeypatch first, so values a test
    loads from a .env file are removed afterwards.
    """

    for variable in (
        "INPUTID_CONFIG_PATH",
        "INPUTID_SEPARATOR",
        "INPUTID_FALLBACK",
        "INPUTID_FORCE_UNIQUENESS",
        "INPUTID_LOG_LEVEL",
    ):
        monkeypatch.setenv(variable, "")
        monkeypatch.delenv(variable)
    monkeypatch.chdir(tmp_path)
