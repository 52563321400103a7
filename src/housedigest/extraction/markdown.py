"""Markdown listing note parser.

Listing notes look like this::

    ### #15: 1023 Liberty Ave, Livingston, TX 77351
    **$450,000** | 3 bed / 2 bath | 1,800 sqft | Built 2023
    **Estimated Value:** $500,000
    **Value Gap:** 11.1%
    **Distance to home base:** 12.5 mi
    Listing: [View Listing](https://example.com/listing/15)
    ![Property photo 1](https://example.com/p1.jpg)

Only the combined price line is required; a section without it is skipped.
"""

import logging
import re
from typing import Optional

from pydantic import ValidationError

from ..models.property import PropertyRecord
from .base import SectionParser

logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r"^### #(\d+): (.+?)[ \t]*$", re.MULTILINE)

SUMMARY_RE = re.compile(
    r"\*\*\$(\d[\d,]*)\*\* \| (\d+) bed / (\d+(?:\.\d+)?) bath"
    r" \| (\d[\d,]*) sqft \| Built (\d{4})"
)
ESTIMATED_VALUE_RE = re.compile(r"\*\*Estimated Value:\*\* \$(\d[\d,]*)")
VALUE_GAP_RE = re.compile(r"\*\*Value Gap:\*\* ([-+]?\d+(?:\.\d+)?)%")
DISTANCE_RE = re.compile(r"\*\*Distance to home base:\*\* (\d+(?:\.\d+)?) mi")
LISTING_RE = re.compile(r"Listing: \[View Listing\]\((.+?)\)")
PHOTO_RE = re.compile(r"!\[Property photo \d+\]\((.+?)\)")


def _to_int(text: str) -> int:
    """Parse an integer, dropping thousands separators."""
    return int(text.replace(",", ""))


class MarkdownSectionParser(SectionParser):
    """Parser for the vault's markdown listing layout."""

    name = "markdown"

    def parse_section(
        self,
        rank: int,
        address: str,
        body: str,
    ) -> Optional[PropertyRecord]:
        summary = SUMMARY_RE.search(body)
        if not summary:
            logger.debug(f"Section #{rank} has no price line, skipping")
            return None

        price, beds, baths, sqft, year = summary.groups()

        value_match = ESTIMATED_VALUE_RE.search(body)
        gap_match = VALUE_GAP_RE.search(body)
        distance_match = DISTANCE_RE.search(body)
        listing_match = LISTING_RE.search(body)

        try:
            return PropertyRecord(
                rank=rank,
                address=address,
                price=_to_int(price),
                beds=int(beds),
                baths=float(baths),
                sqft=_to_int(sqft),
                year_built=int(year),
                estimated_value=_to_int(value_match.group(1)) if value_match else None,
                value_gap=float(gap_match.group(1)) if gap_match else None,
                distance=float(distance_match.group(1)) if distance_match else None,
                listing_url=listing_match.group(1) if listing_match else None,
                photos=tuple(PHOTO_RE.findall(body)),
            )
        except ValidationError as e:
            logger.debug(f"Section #{rank} rejected: {e}")
            return None


def extract_properties(
    content: str,
    parser: Optional[SectionParser] = None,
) -> list[PropertyRecord]:
    """Extract property records from a markdown document.

    Args:
        content: Full document text
        parser: Section parser to use (defaults to MarkdownSectionParser)

    Returns:
        Records in order of appearance; sections without the mandatory
        fields are left out, so this may be shorter than the heading count
    """
    parser = parser or MarkdownSectionParser()
    headings = list(HEADING_RE.finditer(content))

    records = []
    for i, heading in enumerate(headings):
        end = headings[i + 1].start() if i + 1 < len(headings) else len(content)
        body = content[heading.end():end]

        record = parser.parse_section(
            rank=int(heading.group(1)),
            address=heading.group(2).strip(),
            body=body,
        )
        if record is not None:
            records.append(record)

    logger.debug(f"Parsed {len(records)} of {len(headings)} sections")
    return records
