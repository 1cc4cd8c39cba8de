"""Application layer: render cache service, block registry and DTOs."""
