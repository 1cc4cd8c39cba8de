"""Shared utilities: logging setup and request helpers.

Used by application and infrastructure. No business logic.
"""

from viewcache.shared.logging import setup_logging
from viewcache.shared.utils import detect_device

__all__ = ["detect_device", "setup_logging"]
