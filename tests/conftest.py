"""Test configuration and fixtures for skin_layout tests.

This module provides shared fixtures for writing layout files and building
component factories. All test files should use the fixtures defined here
for consistency.
"""

import logging
import sys
from pathlib import Path
from typing import Callable

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from skin_layout.config import ConfigManager
from skin_layout.core.factory import ComponentFactory

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point user config overrides at an empty directory and reset the singleton."""
    config_dir = tmp_path / "user_config"
    config_dir.mkdir()
    monkeypatch.setenv("SKIN_LAYOUT_CONFIG_DIR", str(config_dir))
    ConfigManager.reset()
    yield config_dir
    ConfigManager.reset()


@pytest.fixture
def write_layout(tmp_path) -> Callable[..., Path]:
    """Returns a helper writing XML text to a layout file in a temp directory."""
    counter = {"n": 0}

    def _write(xml: str, name: str = None) -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"layout_{counter['n']}.xml")
        path.write_text(xml, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_factory(write_layout) -> Callable[..., ComponentFactory]:
    """Returns a helper building a factory for XML text, bound to a page context."""

    def _make(xml: str, **context_kwargs) -> ComponentFactory:
        factory = ComponentFactory(write_layout(xml))
        factory.create_page_context(**context_kwargs)
        return factory

    return _make


def _is_pytest_handler(handler: logging.Handler) -> bool:
    return type(handler).__module__.startswith("_pytest")


@pytest.fixture
def restore_logging():
    """Restores logger state touched by logging configuration tests.

    pytest's own capture handlers come and go per test phase and are left
    alone.
    """
    names = ["", "skin_layout", "skin_layout.core.factory"]
    saved = {}
    for name in names:
        lg = logging.getLogger(name)
        own = [h for h in lg.handlers if not _is_pytest_handler(h)]
        saved[name] = (own, lg.level, lg.propagate)
    yield
    for name, (handlers, level, propagate) in saved.items():
        lg = logging.getLogger(name)
        current = list(lg.handlers)
        for h in current:
            if h not in handlers and not _is_pytest_handler(h):
                h.close()
        lg.handlers = handlers + [h for h in current if _is_pytest_handler(h)]
        lg.setLevel(level)
        lg.propagate = propagate
