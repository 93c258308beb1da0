from __future__ import annotations

import logging

import pytest

from kennel.core.config import get_settings


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop handlers that ``setup_logging`` installed during a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    try:
        yield
    finally:
        for handler in root_logger.handlers[:]:
            if handler not in handlers and type(handler) in (logging.StreamHandler, logging.FileHandler):
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.setLevel(level)


@pytest.fixture
def fresh_settings_cache():
    """Clear the cached settings so environment changes are picked up."""
    get_settings.cache_clear()
    try:
        yield
    finally:
        get_settings.cache_clear()
