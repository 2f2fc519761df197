"""Bundled slide images."""
