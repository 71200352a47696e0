"""HTTP surface for the room functions."""

from party_dj.infrastructure.web.app import create_app

__all__ = ["create_app"]
