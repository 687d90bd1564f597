"""
Shared fixtures for the accessibility checker tests.
"""

import os

import pytest

from html_accessibility_checker.utils.config import config_manager


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Run every test against default configuration only."""
    for name in list(os.environ):
        if name.startswith(config_manager.env_prefix):
            monkeypatch.delenv(name)

    saved = config_manager.user_config
    config_manager.user_config = {}
    yield config_manager
    config_manager.user_config = saved


@pytest.fixture
def sample_html():
    """A document with one failure for every rule."""
    return """
    <html>
      <body>
        <img src="logo.png">
        <h1>Title</h1>
        <h3>Skipped</h3>
        <a href="/home"></a>
        <input type="text" id="name">
        <p style="color: #777777; background-color: #808080">Faint text</p>
        <span onclick="go()">Click</span>
      </body>
    </html>
    """
