"""Device class detection from the User-Agent header.

Coarse on purpose: the result partitions the render cache, so every extra
class multiplies cache entries.
"""

import re

from viewcache.core.constants import DEVICE_DESKTOP, DEVICE_MOBILE, DEVICE_TABLET

_TABLET_RE = re.compile(r"ipad|tablet|kindle|silk|playbook|android(?!.*mobile)", re.IGNORECASE)
_MOBILE_RE = re.compile(
    r"mobi|iphone|ipod|android.*mobile|windows phone|blackberry|opera mini", re.IGNORECASE
)


def detect_device(user_agent: str | None) -> str:
    """Return 'tablet', 'mobile' or 'desktop' for a User-Agent string.

    Missing or unrecognized agents are 'desktop'.
    """
    if not user_agent:
        return DEVICE_DESKTOP
    if _TABLET_RE.search(user_agent):
        return DEVICE_TABLET
    if _MOBILE_RE.search(user_agent):
        return DEVICE_MOBILE
    return DEVICE_DESKTOP
