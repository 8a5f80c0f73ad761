#!/usr/bin/env python3
"""Pytest configuration and shared fixtures."""

import os
import logging
import sys
import pytest
from unittest.mock import Mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mozpaste.paste_client import PasteClient

LANDING_PAGE = """<!DOCTYPE html>
<html>
<body>
  <form method="post" action="/">
    <input type="hidden" name="csrfmiddlewaretoken" value="tok123">
    <textarea name="content"></textarea>
  </form>
</body>
</html>
"""

PASTE_URL = "https://paste.mozilla.org/AbCd1234"


@pytest.fixture
def client():
    """Create a PasteClient instance for testing."""
    return PasteClient(timeout=5)


@pytest.fixture
def landing_response():
    """A successful GET of the landing page."""
    response = Mock()
    response.text = LANDING_PAGE
    response.raise_for_status = Mock()
    return response


@pytest.fixture
def paste_response():
    """A successful POST that was redirected to the paste."""
    response = Mock()
    response.url = PASTE_URL
    response.history = [Mock(status_code=302)]
    response.raise_for_status = Mock()
    return response


@pytest.fixture
def source_file(tmp_path):
    """Create a small Python file to paste."""
    path = tmp_path / "notes.py"
    path.write_text("print('hello')\n", encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
