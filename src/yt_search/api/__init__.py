"""YouTube page clients and result extractors."""

from .base import BaseYouTubeClient, InitData, parse_init_data
from .extractors import (
    CHANNEL_EXTRACTOR,
    EXTRACTORS,
    PLAYLIST_EXTRACTOR,
    VIDEO_EXTRACTOR,
    ResultExtractor,
    extract_results,
    parse_section_list,
)
from .youtube import YouTubeSearchClient

__all__ = [
    "BaseYouTubeClient",
    "InitData",
    "parse_init_data",
    "ResultExtractor",
    "EXTRACTORS",
    "VIDEO_EXTRACTOR",
    "CHANNEL_EXTRACTOR",
    "PLAYLIST_EXTRACTOR",
    "extract_results",
    "parse_section_list",
    "YouTubeSearchClient",
]
