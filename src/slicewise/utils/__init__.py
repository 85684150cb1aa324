"""Utility modules for slicewise.

Provides:
- logger: get_logger for logging
"""

from slicewise.utils.logger import get_logger

__all__ = ["get_logger"]
