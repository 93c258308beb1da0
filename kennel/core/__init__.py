"""
Core utilities and configuration for Kennel.

This package provides core functionality including logging configuration,
settings, the error hierarchy and the database layer.
"""

from kennel.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
