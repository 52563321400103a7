"""CLI runner for the daily newest-properties report.

Run via: python -m housedigest
Or keep it resident with: python -m housedigest --schedule
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from .analysis.ranker import PropertyRanker
from .config import Settings
from .delivery.telegram import TelegramClient
from .extraction import extract_properties
from .reports.chunker import split_into_chunks
from .reports.renderer import ReportRenderer

logger = logging.getLogger(__name__)
console = Console()

# Directory names starting with this are vault templates, not profiles
TEMPLATE_PREFIX = "<"


@dataclass
class ProfileResult:
    """Outcome of processing one profile."""

    profile: str
    status: str  # "sent", "dry_run", "missing", "empty"
    property_count: int = 0
    chunks_sent: int = 0


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    # httpx logs request URLs, which carry the bot token
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


class ReportRunner:
    """Drive extraction, ranking, rendering and delivery for every profile.

    Profiles are processed one at a time and chunks are delivered strictly
    in order. A delivery failure propagates and ends the run.

    Example:
        async with TelegramClient(token, chat_id) as client:
            runner = ReportRunner(settings, client)
            results = await runner.run()
    """

    def __init__(
        self,
        settings: Settings,
        client: Optional[TelegramClient] = None,
        renderer: Optional[ReportRenderer] = None,
        dry_run: bool = False,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize runner.

        Args:
            settings: Application settings
            client: Delivery client; required unless dry_run is set
            renderer: Optional ReportRenderer (built from settings if not given)
            dry_run: Print chunks to the console instead of sending them
            sleep: Awaitable used for the pause between chunks
        """
        if client is None and not dry_run:
            raise ValueError("A delivery client is required unless dry_run is set")

        self.settings = settings
        self.client = client
        self.renderer = renderer or ReportRenderer(
            top_n=settings.top_n, ranker=PropertyRanker()
        )
        self.dry_run = dry_run
        self._sleep = sleep

    def find_profiles(self) -> list[str]:
        """List profile directory names, skipping template entries."""
        base = self.settings.profiles_dir
        if not base.is_dir():
            logger.error(f"Profiles folder not found: {base}")
            return []

        return sorted(
            entry.name
            for entry in base.iterdir()
            if entry.is_dir() and not entry.name.startswith(TEMPLATE_PREFIX)
        )

    def latest_path(self, profile: str) -> Path:
        return self.settings.profiles_dir / profile / self.settings.latest_filename

    def load_latest(self, profile: str) -> Optional[str]:
        """Read the profile's latest document, or None if it doesn't exist."""
        path = self.latest_path(profile)
        if not path.is_file():
            logger.warning(f"No {self.settings.latest_filename} found for {profile}")
            return None
        return path.read_text(encoding="utf-8")

    async def deliver(self, chunks: Sequence[str]) -> int:
        """Send chunks in order, pausing between sends.

        Returns:
            Number of chunks delivered
        """
        for i, chunk in enumerate(chunks, 1):
            logger.info(f"Sending chunk {i}/{len(chunks)} ({len(chunk)} chars)")
            if self.dry_run:
                console.rule(f"chunk {i}/{len(chunks)}")
                console.print(chunk, markup=False, highlight=False, end="")
                continue
            await self.client.send_message(chunk)
            await self._sleep(self.settings.send_delay)
        return len(chunks)

    async def process_profile(self, profile: str) -> ProfileResult:
        """Build and deliver the report for one profile."""
        logger.info(f"Processing profile: {profile}")

        content = self.load_latest(profile)
        if content is None:
            return ProfileResult(profile=profile, status="missing")

        properties = extract_properties(content)
        logger.info(f"Found {len(properties)} properties in {profile}")
        if not properties:
            return ProfileResult(profile=profile, status="empty")

        report = self.renderer.generate_report(profile, properties)
        chunks = split_into_chunks(report, self.settings.max_chunk_size)
        logger.info(f"Generated report for {profile}: {len(report)} chars, {len(chunks)} chunk(s)")

        sent = await self.deliver(chunks)
        logger.info(f"Report sent for {profile}")

        return ProfileResult(
            profile=profile,
            status="dry_run" if self.dry_run else "sent",
            property_count=len(properties),
            chunks_sent=sent,
        )

    async def run(self, profiles: Optional[Sequence[str]] = None) -> list[ProfileResult]:
        """Process every profile (or the given ones) in order.

        Args:
            profiles: Explicit profile names; discovered when not given

        Returns:
            One ProfileResult per processed profile
        """
        if profiles is None:
            profiles = self.find_profiles()
        logger.info(f"Found profiles: {', '.join(profiles) or 'none'}")

        results = []
        for profile in profiles:
            results.append(await self.process_profile(profile))

        logger.info("Daily report complete")
        return results


async def run_daily_report(
    settings: Settings,
    profiles: Optional[Sequence[str]] = None,
    dry_run: bool = False,
    verbose: bool = False,
) -> int:
    """Run one report pass.

    Args:
        settings: Application settings
        profiles: Only process these profiles
        dry_run: Print reports instead of sending them
        verbose: Re-raise errors instead of returning -1

    Returns:
        Number of profiles reported, or -1 on failure
    """
    try:
        if dry_run:
            results = await ReportRunner(settings, dry_run=True).run(profiles)
        else:
            settings.require_telegram()
            async with TelegramClient(
                bot_token=settings.telegram_bot_token,
                chat_id=settings.telegram_chat_id,
                base_url=settings.telegram_api_url,
                timeout=settings.request_timeout,
            ) as client:
                results = await ReportRunner(settings, client).run(profiles)
    except Exception as e:
        logger.exception(f"Error generating report: {e}")
        if verbose:
            raise
        return -1

    return sum(1 for r in results if r.chunks_sent)


def main() -> None:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="HouseDigest daily newest-properties report",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m housedigest
  python -m housedigest --profile "Family Home" --dry-run
  python -m housedigest --schedule

Environment:
  TELEGRAM_BOT_TOKEN, TELEGRAM_CHAT_ID, HOUSEDIGEST_VAULT_PATH, ...
        """,
    )

    parser.add_argument(
        "--profile",
        action="append",
        metavar="NAME",
        help="Only report this profile (repeatable)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the report chunks instead of sending them",
    )
    parser.add_argument(
        "--schedule",
        action="store_true",
        help="Stay resident and send the report every day at the configured time",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    setup_logging(verbose=args.verbose)
    settings = Settings()

    async def job() -> int:
        return await run_daily_report(
            settings,
            profiles=args.profile,
            dry_run=args.dry_run,
        )

    try:
        if args.schedule:
            from .scheduler import DailyScheduler

            asyncio.run(DailyScheduler(settings, job).run_forever())
            return

        result = asyncio.run(run_daily_report(
            settings,
            profiles=args.profile,
            dry_run=args.dry_run,
            verbose=args.verbose,
        ))
        sys.exit(0 if result >= 0 else 1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
