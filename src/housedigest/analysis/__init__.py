"""Analysis modules for selecting report properties."""

from .ranker import DEFAULT_TOP_N, PropertyRanker, get_newest_properties

__all__ = ["DEFAULT_TOP_N", "PropertyRanker", "get_newest_properties"]
