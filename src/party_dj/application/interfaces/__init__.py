"""
Application Interfaces (Ports)

Abstract interfaces that infrastructure adapters implement.
"""

from party_dj.application.interfaces.playlist_service import (
    PlaylistService,
    PlaylistServiceFactory,
)

__all__ = [
    "PlaylistService",
    "PlaylistServiceFactory",
]
