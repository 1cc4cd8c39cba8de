"""viewcache: page and block rendering with a tagged, keyed render cache."""
