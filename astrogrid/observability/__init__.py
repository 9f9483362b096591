"""
Observability package: logging configuration.
"""

from astrogrid.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
