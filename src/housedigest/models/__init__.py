"""Data models for HouseDigest."""

from housedigest.models.property import PropertyRecord

__all__ = [
    "PropertyRecord",
]
