"""Result values holding Ok or Err, panics, and UTF-8 sequence helpers."""

__version__ = "1.0.0"
__all__ = ["panic", "text", "variants", "result"]