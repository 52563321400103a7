"""Static file server with a config-key endpoint."""

from .app import create_app

__all__ = ["create_app"]
