"""Pytest configuration and fixtures."""

import logging

import pytest
from PIL import Image


class FakeResponse:
    """Stand-in for requests.Response with just what the DeepL client reads."""

    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def wayland_env():
    """A minimal environment for a run under Wayland with a key in the env."""
    return {"WAYLAND_DISPLAY": "wayland-1", "DEEPL_API_KEY": "env-key"}


@pytest.fixture
def png_file(tmp_path):
    """A small valid PNG on disk."""
    path = tmp_path / "sample.png"
    Image.new("RGB", (40, 20), "white").save(path)
    return path


@pytest.fixture(autouse=True)
def reset_trein_logger():
    """cli.main() installs handlers and disables propagation; undo that between tests."""
    yield
    logger = logging.getLogger("trein")
    for h in list(logger.handlers):
        if getattr(h, "trein_managed", False):
            logger.removeHandler(h)
            h.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
