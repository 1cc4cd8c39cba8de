"""Shared utils: request helpers."""

from viewcache.shared.utils.device import detect_device

__all__ = ["detect_device"]
