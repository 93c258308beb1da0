"""
Datastore lifecycle management.

There is no global engine: callers open a ``DatastoreAdapter`` at process
start, pass it (or the repositories built on it) to whatever needs
persistence, and close it on shutdown. ``datastore_session`` bundles those
steps for scripts and tests.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from kennel.core.config import Settings, get_settings
from kennel.core.logging_config import get_logger, setup_logging

from .adapter import DatastoreAdapter
from .utils import RepoBundle, build_repos

logger = get_logger(__name__)


def init_db(settings: Optional[Settings] = None) -> DatastoreAdapter:
    """Open a datastore adapter from settings.

    Creates the tables when ``KENNEL_CREATE_SCHEMA`` is enabled.
    """
    return DatastoreAdapter.from_settings(settings or get_settings()).open()


@contextmanager
def datastore_session(
    settings: Optional[Settings] = None, configure_logging: bool = False
) -> Iterator[RepoBundle]:
    """
    Open the datastore for the duration of a ``with`` block.

    Args:
        settings: Settings to use; the process-wide settings by default
        configure_logging: Call ``setup_logging`` from the same settings first

    Yields:
        RepoBundle: Repositories over the open adapter
    """
    settings = settings or get_settings()
    if configure_logging:
        log_settings = settings.logging
        setup_logging(
            log_level=log_settings.level,
            log_format=log_settings.format,
            enable_file=log_settings.enable_file,
            log_file_dir=log_settings.file_dir,
        )
    adapter = init_db(settings)
    try:
        yield build_repos(adapter)
    finally:
        adapter.close()
