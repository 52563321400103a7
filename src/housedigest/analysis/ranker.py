"""Property ranking for the daily report.

This module selects which tracked properties make it into a report.
"""

import logging
from typing import Iterable

from ..models.property import PropertyRecord

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 10


class PropertyRanker:
    """Rank property records for the daily report.

    Example:
        ranker = PropertyRanker()

        newest = ranker.get_newest(records, n=10)
        for record in newest:
            print(f"{record.address}: built {record.year_built}")
    """

    def rank_by_year_built(
        self,
        records: Iterable[PropertyRecord],
    ) -> list[PropertyRecord]:
        """Rank properties by year built (newest first).

        Records without a year are left out. The sort is stable, so records
        built the same year keep their original relative order.

        Args:
            records: Properties to rank

        Returns:
            Sorted list of PropertyRecord
        """
        dated = [r for r in records if r.year_built]
        return sorted(dated, key=lambda r: r.year_built, reverse=True)

    def get_newest(
        self,
        records: Iterable[PropertyRecord],
        n: int = DEFAULT_TOP_N,
    ) -> list[PropertyRecord]:
        """Get the N most recently built properties.

        Args:
            records: Properties to rank
            n: Number of properties to return

        Returns:
            Up to n records, newest first
        """
        if n <= 0:
            return []
        return self.rank_by_year_built(records)[:n]


def get_newest_properties(
    records: Iterable[PropertyRecord],
    n: int = DEFAULT_TOP_N,
) -> list[PropertyRecord]:
    """Shortcut for ``PropertyRanker().get_newest``."""
    return PropertyRanker().get_newest(records, n=n)
