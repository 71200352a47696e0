"""Opening and closing a per-request playlist client."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from party_dj.domain.shared.constants import UpstreamServices
from party_dj.domain.shared.exceptions import UpstreamFailureError
from party_dj.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ..interfaces.playlist_service import PlaylistService, PlaylistServiceFactory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def playlist_session(
    factory: PlaylistServiceFactory, access_token: str
) -> AsyncIterator[PlaylistService]:
    """Build a playlist client for ``access_token`` and close it on exit.

    Failures while building or closing the client are raised as a Spotify
    ``UpstreamFailureError``. When the body has already failed, a close
    failure is only logged so the body's error reaches the caller.
    """
    try:
        playlists = factory(access_token)
    except Exception as exc:
        logger.exception(LogTemplates.PLAYLIST_CLIENT_OPEN_FAILED)
        raise UpstreamFailureError(UpstreamServices.SPOTIFY) from exc

    try:
        yield playlists
    except BaseException:
        try:
            await playlists.aclose()
        except Exception:
            logger.exception(LogTemplates.PLAYLIST_CLIENT_CLOSE_FAILED)
        raise

    try:
        await playlists.aclose()
    except Exception as exc:
        logger.exception(LogTemplates.PLAYLIST_CLIENT_CLOSE_FAILED)
        raise UpstreamFailureError(UpstreamServices.SPOTIFY) from exc
