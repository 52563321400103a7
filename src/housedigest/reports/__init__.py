"""Report rendering and message chunking."""

from .chunker import DEFAULT_MAX_CHUNK_SIZE, split_into_chunks
from .renderer import ReportRenderer, find_best_value, format_price, year_badge

__all__ = [
    "DEFAULT_MAX_CHUNK_SIZE",
    "ReportRenderer",
    "find_best_value",
    "format_price",
    "split_into_chunks",
    "year_badge",
]
