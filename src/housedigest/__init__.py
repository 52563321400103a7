"""HouseDigest - daily newest-listings report delivered to Telegram."""

__version__ = "0.1.0"
