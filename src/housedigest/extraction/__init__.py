"""Listing extraction from markdown notes.

Main Components:
    - SectionParser: Abstract base class for per-section parsers
    - MarkdownSectionParser: Parser for the vault's listing layout
    - extract_properties: Splits a document on headings and parses each section

Example usage:
    from housedigest.extraction import extract_properties

    records = extract_properties(Path("latest.md").read_text())
"""

from .base import SectionParser
from .markdown import MarkdownSectionParser, extract_properties

__all__ = [
    "SectionParser",
    "MarkdownSectionParser",
    "extract_properties",
]
