"""Domain models."""

from .slide import WHITE, Slide, normalize_hex_color

__all__ = ["WHITE", "Slide", "normalize_hex_color"]
