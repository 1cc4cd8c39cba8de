"""Core constants: cache key structure and content naming conventions.

Single source of truth for key format and template roots. Used by
infrastructure.cache.keys and the render cache service.
"""

# Content kinds (namespace segment of every render cache key)
KIND_PAGE = "page"
KIND_BLOCK = "block"

# Delimiter for composite keys; kind and path are percent-escaped around it
CACHE_KEY_SEP = ":"
DEFAULT_CACHE_KEY_PREFIX = "view"

# Template roots
PAGES_TEMPLATE_ROOT = "pages"

# Appended to the type name derived from a block path ("index/index" -> "IndexIndexBlock")
BLOCK_CLASS_SUFFIX = "Block"

# Device classes reported by the User-Agent sniffer
DEVICE_MOBILE = "mobile"
DEVICE_TABLET = "tablet"
DEVICE_DESKTOP = "desktop"
