"""String helpers: erasing, replacing, trimming, splitting, joining, ASCII case handling and wildcard matching."""

__version__ = "0.1.0"
__all__ = ["string_util"]