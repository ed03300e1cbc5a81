"""Search YouTube without an API key.

Example:
    results, state = await yt_search.search("rickroll")
    more = await yt_search.next_page(state)
"""

import aiohttp

from .api import YouTubeSearchClient
from .core.models import (
    ChannelResult,
    PaginationState,
    PlaylistResult,
    PlaylistVideo,
    ResultKind,
    SearchResult,
    SearchResultType,
    Thumbnail,
    VideoResult,
)
from .core.settings import SearchSettings
from .errors import (
    BlockedError,
    MalformedNodeError,
    NoDataError,
    UpstreamFormatError,
    YtSearchError,
)


async def search(
    query: str,
    type: SearchResultType | str | None = None,
    settings: SearchSettings | None = None,
    session: aiohttp.ClientSession | None = None,
) -> tuple[list[SearchResult], PaginationState]:
    """Search YouTube with a short-lived client. See YouTubeSearchClient.search().

    A passed-in `session` is used as is and left open.
    """
    client = YouTubeSearchClient(settings, session)
    try:
        return await client.search(query, type)
    finally:
        if session is None:
            await client.close()


async def next_page(
    state: PaginationState,
    settings: SearchSettings | None = None,
    session: aiohttp.ClientSession | None = None,
) -> list[SearchResult]:
    """Get the next page for `state` with a short-lived client.

    See YouTubeSearchClient.next_page(). A passed-in `session` is used as is
    and left open.
    """
    client = YouTubeSearchClient(settings, session)
    try:
        return await client.next_page(state)
    finally:
        if session is None:
            await client.close()


__all__ = [
    "search",
    "next_page",
    "YouTubeSearchClient",
    "SearchSettings",
    "ChannelResult",
    "PaginationState",
    "PlaylistResult",
    "PlaylistVideo",
    "ResultKind",
    "SearchResult",
    "SearchResultType",
    "Thumbnail",
    "VideoResult",
    "YtSearchError",
    "UpstreamFormatError",
    "NoDataError",
    "BlockedError",
    "MalformedNodeError",
]
