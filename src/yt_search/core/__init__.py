"""Core models and settings for yt_search."""

from .models import (
    ChannelResult,
    ChannelTab,
    PaginationState,
    PlaylistData,
    PlaylistResult,
    PlaylistVideo,
    ReelResult,
    RequestBody,
    ResultKind,
    SearchResult,
    SearchResultType,
    Thumbnail,
    VideoChannel,
    VideoResult,
    ViewsText,
)
from .settings import SearchSettings

__all__ = [
    "ChannelResult",
    "ChannelTab",
    "PaginationState",
    "PlaylistData",
    "PlaylistResult",
    "PlaylistVideo",
    "ReelResult",
    "RequestBody",
    "ResultKind",
    "SearchResult",
    "SearchResultType",
    "Thumbnail",
    "VideoChannel",
    "VideoResult",
    "ViewsText",
    "SearchSettings",
]
