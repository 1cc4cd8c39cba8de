"""Infrastructure: cache stores and the template renderer."""
