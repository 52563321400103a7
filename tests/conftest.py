"""Pytest fixtures and test utilities."""

from datetime import date
from pathlib import Path

import pytest

from housedigest.analysis import PropertyRanker
from housedigest.config import Settings
from housedigest.models.property import PropertyRecord
from housedigest.reports import ReportRenderer

FULL_SECTION = """### #1: 1023 Liberty Ave, Livingston, TX 77351
**$450,000** | 3 bed / 2 bath | 1,800 sqft | Built 2023
**Estimated Value:** $500,000
**Value Gap:** 11.1%
**Distance to home base:** 12.5 mi
Listing: [View Listing](https://www.example.com/homes/1023-liberty-ave-livingston-tx-77351)
![Property photo 1](https://img.example.com/1023/1.jpg)
![Property photo 2](https://img.example.com/1023/2.jpg)
![Property photo 3](https://img.example.com/1023/3.jpg)
"""

MINIMAL_SECTION = """### #2: 88 Oak St, Onalaska, TX 77360
**$215,500** | 2 bed / 1.5 bath | 1,050 sqft | Built 1998
"""

NO_PRICE_SECTION = """### #3: 5 Lake Rd, Coldspring, TX 77331
Price on request. Built 2021.
"""


@pytest.fixture
def ranker() -> PropertyRanker:
    """PropertyRanker instance."""
    return PropertyRanker()


@pytest.fixture
def renderer() -> ReportRenderer:
    """ReportRenderer instance."""
    return ReportRenderer(top_n=10)


@pytest.fixture
def report_date() -> date:
    """Frozen report date (a Monday)."""
    return date(2026, 10, 19)


@pytest.fixture
def sample_document() -> str:
    """Listing note with one full, one minimal and one unparseable section."""
    return (
        "# Real Estate Mission Control\n\nUpdated daily.\n\n"
        + FULL_SECTION
        + "\n"
        + MINIMAL_SECTION
        + "\n"
        + NO_PRICE_SECTION
    )


def make_record(
    rank: int = 1,
    year_built: int = 2000,
    price: int = 300000,
    value_gap: float | None = None,
    address: str | None = None,
    **kwargs,
) -> PropertyRecord:
    """Build a PropertyRecord with sensible defaults."""
    return PropertyRecord(
        rank=rank,
        address=address or f"{rank} Test Street, Livingston, TX 77351",
        price=price,
        beds=kwargs.pop("beds", 3),
        baths=kwargs.pop("baths", 2),
        sqft=kwargs.pop("sqft", 1500),
        year_built=year_built,
        value_gap=value_gap,
        **kwargs,
    )


@pytest.fixture
def record_factory():
    """Factory for PropertyRecord instances."""
    return make_record


@pytest.fixture
def new_build() -> PropertyRecord:
    """Recent build with every optional field."""
    return make_record(
        rank=1,
        year_built=2023,
        price=450000,
        address="1023 Liberty Ave, Livingston, TX 77351",
        estimated_value=500000,
        value_gap=11.1,
        distance=12.5,
        listing_url="https://www.example.com/homes/1023-liberty-ave-livingston-tx-77351",
        photos=("https://img.example.com/1.jpg", "https://img.example.com/2.jpg"),
    )


@pytest.fixture
def older_build() -> PropertyRecord:
    """Older build with only mandatory fields."""
    return make_record(rank=2, year_built=1998, price=215500, baths=1.5, sqft=1050)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a temporary vault, ignoring any .env file."""
    return Settings(
        _env_file=None,
        vault_path=tmp_path / "vault",
        folder_name="Real Estate Mission Control",
        telegram_bot_token="123:abc",
        telegram_chat_id="42",
        send_delay=0.5,
        server_root=tmp_path / "www",
        config_key="sk-test",
    )


@pytest.fixture
def vault(settings: Settings, sample_document: str) -> Path:
    """Vault with two profiles, a template entry and a profile without notes."""
    base = settings.profiles_dir
    (base / "Family Home").mkdir(parents=True)
    (base / "Family Home" / "latest.md").write_text(sample_document, encoding="utf-8")
    (base / "Lake House").mkdir()
    (base / "Lake House" / "latest.md").write_text(MINIMAL_SECTION, encoding="utf-8")
    (base / "<Profile Template>").mkdir()
    (base / "<Profile Template>" / "latest.md").write_text(FULL_SECTION, encoding="utf-8")
    (base / "Empty Profile").mkdir()
    (base / "README.md").write_text("not a profile", encoding="utf-8")
    return base
