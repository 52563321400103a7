"""Daily report rendering.

Builds the Telegram message (HTML parse mode) summarising the newest
properties of one profile.
"""

import html
import logging
import math
from datetime import date
from typing import Optional, Sequence

from ..analysis.ranker import DEFAULT_TOP_N, PropertyRanker
from ..models.property import PropertyRecord

logger = logging.getLogger(__name__)

DIVIDER = "━" * 28
URL_PREVIEW_LENGTH = 50


def format_price(price: float) -> str:
    """Format an amount as dollars with thousands separators."""
    return f"${int(price):,}"


def format_number(value: float) -> str:
    """Render a number without a trailing .0 (2.0 -> "2", 2.5 -> "2.5")."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_gap(gap: Optional[float]) -> str:
    if gap is None:
        return "N/A"
    sign = "+" if gap > 0 else ""
    return f"{sign}{format_number(gap)}%"


def format_report_date(day: date) -> str:
    """Full date, e.g. "Monday, October 19, 2026"."""
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def year_badge(year_built: int) -> str:
    """Badge for how recent a build is."""
    if year_built >= 2020:
        return "🆕"
    elif year_built >= 2010:
        return "✨"
    return "🏠"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def find_best_value(records: Sequence[PropertyRecord]) -> Optional[PropertyRecord]:
    """Record with the highest value gap.

    Records without a gap are never picked; on ties the first one wins.
    Returns None when no record has a gap.
    """
    best = None
    for record in records:
        if record.value_gap is None:
            continue
        if best is None or record.value_gap > best.value_gap:
            best = record
    return best


class ReportRenderer:
    """Render the daily newest-properties report.

    Example:
        renderer = ReportRenderer(top_n=10)
        report = renderer.generate_report("Family Home", records)
    """

    def __init__(
        self,
        top_n: int = DEFAULT_TOP_N,
        ranker: Optional[PropertyRanker] = None,
    ):
        """Initialize renderer.

        Args:
            top_n: Number of newest properties to list
            ranker: Optional PropertyRanker instance.
                    Creates new instance if not provided.
        """
        self.top_n = top_n
        self.ranker = ranker or PropertyRanker()

    def render_entry(self, position: int, record: PropertyRecord) -> list[str]:
        """Lines for one ranked property, trailing blank line included."""
        lines = [
            f"<b>{position}. {year_badge(record.year_built)} Built {record.year_built}</b>",
            f"📍 {html.escape(record.address, quote=False)}",
            f"💰 {format_price(record.price)} | {record.beds}bd/{format_number(record.baths)}ba"
            f" | {record.sqft:,} sqft",
        ]

        if record.estimated_value is not None:
            lines.append(
                f"📊 Est: {format_price(record.estimated_value)} | Gap: {format_gap(record.value_gap)}"
            )

        if record.distance is not None:
            lines.append(f"📏 {format_number(record.distance)} mi from base")

        if record.listing_url:
            url = record.listing_url[:URL_PREVIEW_LENGTH]
            if len(record.listing_url) > URL_PREVIEW_LENGTH:
                url += "..."
            lines.append(f"🔗 {html.escape(url, quote=False)}")

        if record.has_photos:
            lines.append(f"📸 {len(record.photos)} photos available")

        lines.append("")
        return lines

    def render_stats(
        self,
        properties: Sequence[PropertyRecord],
        newest: Sequence[PropertyRecord],
    ) -> list[str]:
        """Quick stats block: averages over the ranked subset, total tracked."""
        if newest:
            avg_price = format_price(
                round_half_up(sum(r.price for r in newest) / len(newest))
            )
            avg_year = str(round_half_up(sum(r.year_built for r in newest) / len(newest)))
        else:
            avg_price = avg_year = "N/A"

        lines = [
            DIVIDER,
            "<b>📊 QUICK STATS:</b>",
            f"• Avg Price: {avg_price}",
            f"• Avg Year Built: {avg_year}",
            f"• Total Properties Tracked: {len(properties)}",
        ]

        best = find_best_value(newest)
        if best is not None:
            lines.extend([
                f"• 🔥 Best Value: {html.escape(best.short_address, quote=False)}",
                f"  ({format_gap(best.value_gap)} gap)",
            ])

        return lines

    def generate_report(
        self,
        profile_name: str,
        properties: Sequence[PropertyRecord],
        newest: Optional[Sequence[PropertyRecord]] = None,
        today: Optional[date] = None,
    ) -> str:
        """Generate the report text for one profile.

        Args:
            profile_name: Profile label shown in the title block
            properties: Every record extracted for the profile
            newest: Ranked subset to list; ranked here when not given
            today: Report date (defaults to today)

        Returns:
            Report text, every line newline-terminated
        """
        if newest is None:
            newest = self.ranker.get_newest(properties, n=self.top_n)
        today = today or date.today()

        lines = [
            "🏠 <b>DAILY REAL ESTATE REPORT</b>",
            f"📍 Profile: {html.escape(profile_name, quote=False)}",
            f"📅 {format_report_date(today)}",
            DIVIDER,
            "",
            f"<b>🏗️ TOP {self.top_n} NEWEST PROPERTIES</b>",
            "",
        ]

        for position, record in enumerate(newest, 1):
            lines.extend(self.render_entry(position, record))

        lines.extend(self.render_stats(properties, newest))

        report = "\n".join(lines) + "\n"
        logger.debug(f"Rendered report for {profile_name}: {len(report)} chars")
        return report
