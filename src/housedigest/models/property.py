"""Property record data model."""

from pydantic import BaseModel, Field


class PropertyRecord(BaseModel):
    """One listing section extracted from a profile's markdown notes.

    Records are immutable once built. Mandatory fields come from the combined
    price/beds/baths/sqft/year line; everything else is optional and stays
    None (or an empty tuple for photos) when the note doesn't carry it.
    """

    # Position in the source document, not the display order
    rank: int = Field(..., description="1-based rank from the section heading")
    address: str = Field(..., min_length=1, description="Street address line")

    # Mandatory listing facts
    price: int = Field(..., ge=0, description="Asking price")
    beds: int = Field(..., ge=0, description="Number of bedrooms")
    baths: float = Field(..., ge=0, description="Number of bathrooms (allows half)")
    sqft: int = Field(..., ge=0, description="Living area in sqft")
    year_built: int = Field(..., ge=1000, le=9999, description="Year property was built")

    # Valuation
    estimated_value: int | None = Field(default=None, ge=0, description="Estimated market value")
    value_gap: float | None = Field(
        default=None, description="Percentage gap between estimate and price"
    )
    distance: float | None = Field(default=None, ge=0, description="Miles to home base")

    # Links
    listing_url: str | None = Field(default=None, description="URL to listing")
    photos: tuple[str, ...] = Field(default=(), description="Photo URLs in order")

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
    }

    @property
    def short_address(self) -> str:
        """Street part of the address (text before the first comma)."""
        return self.address.split(",")[0]

    @property
    def has_photos(self) -> bool:
        return bool(self.photos)
