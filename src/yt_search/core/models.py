"""Core data models for yt_search."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ResultKind(str, Enum):
    """Discriminator carried by every search result."""

    VIDEO = "video"
    CHANNEL = "channel"
    PLAYLIST = "playlist"
    REEL = "reel"


class SearchResultType(str, Enum):
    """Search result filters accepted by the results page."""

    VIDEO = "video"
    CHANNEL = "channel"
    PLAYLIST = "playlist"
    MOVIE = "movie"

    @property
    def filter_token(self) -> str:
        """Get the `sp` query parameter value for this filter."""
        return f"EgIQ{_FILTER_CODES[self]}=="


_FILTER_CODES = {
    SearchResultType.VIDEO: "AQ",
    SearchResultType.CHANNEL: "Ag",
    SearchResultType.PLAYLIST: "Aw",
    SearchResultType.MOVIE: "BA",
}


@dataclass(frozen=True)
class Thumbnail:
    """A single thumbnail image."""

    url: str
    width: int
    height: int

    def to_dict(self) -> dict:
        return {"url": self.url, "width": self.width, "height": self.height}


def _thumbs_to_list(thumbnails: tuple[Thumbnail, ...]) -> list[dict]:
    return [t.to_dict() for t in thumbnails]


# Result models are frozen and hold tuples, so they are hashable.


@dataclass(frozen=True)
class VideoChannel:
    """The channel that uploaded a video."""

    title: str | None
    thumbnails: tuple[Thumbnail, ...] = ()


@dataclass(frozen=True)
class ViewsText:
    """Pre-rendered view count text, e.g. "1.2M views"."""

    short: str
    long: str


@dataclass(frozen=True)
class VideoResult:
    """A video search result.

    `length_text` is None for live streams, and the `lengthText` key is
    left out of `to_dict()` entirely in that case.
    """

    id: str
    thumbnails: tuple[Thumbnail, ...]
    title: str
    channel: VideoChannel
    live: bool
    views_text: ViewsText
    length_text: str | None = None
    type: ResultKind = field(default=ResultKind.VIDEO, init=False)

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "type": self.type.value,
            "id": self.id,
            "thumbnails": _thumbs_to_list(self.thumbnails),
            "title": self.title,
            "channel": {
                "title": self.channel.title,
                "thumbnails": _thumbs_to_list(self.channel.thumbnails),
            },
            "live": self.live,
        }
        if not self.live:
            data["lengthText"] = self.length_text
        data["viewsText"] = {"short": self.views_text.short, "long": self.views_text.long}
        return data


@dataclass(frozen=True)
class ChannelResult:
    """A channel search result."""

    id: str
    thumbnails: tuple[Thumbnail, ...]
    title: str
    description: str | None  # None when the card has no description snippet
    subscribers_text: str
    type: ResultKind = field(default=ResultKind.CHANNEL, init=False)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "id": self.id,
            "thumbnails": _thumbs_to_list(self.thumbnails),
            "title": self.title,
            "description": self.description,
            "subscribersText": self.subscribers_text,
        }


@dataclass(frozen=True)
class PlaylistVideo:
    """A video listed on a playlist card."""

    id: str
    title: str
    length_text: str

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "lengthText": self.length_text}


@dataclass(frozen=True)
class PlaylistResult:
    """A playlist search result."""

    id: str
    thumbnail: tuple[Thumbnail, ...]
    title: str
    videos: tuple[PlaylistVideo, ...] = ()
    type: ResultKind = field(default=ResultKind.PLAYLIST, init=False)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "id": self.id,
            "thumbnail": _thumbs_to_list(self.thumbnail),
            "title": self.title,
            "videos": [v.to_dict() for v in self.videos],
        }


SearchResult = VideoResult | ChannelResult | PlaylistResult


@dataclass(frozen=True)
class ReelResult:
    """A short ("reel") shown on the home page."""

    id: str
    thumbnail: Thumbnail
    title: str
    inline_playback_endpoint: dict = field(default_factory=dict, hash=False)
    type: ResultKind = field(default=ResultKind.REEL, init=False)


@dataclass
class PlaylistData:
    """Videos and raw metadata of a playlist page."""

    items: list[PlaylistVideo]
    metadata: dict | None = None


@dataclass
class ChannelTab:
    """One tab of a channel page with its raw renderer content."""

    title: str
    content: dict | None = None


@dataclass
class RequestBody:
    """JSON body echoed back to the continuation endpoint."""

    context: dict
    continuation: str | None = None


@dataclass
class PaginationState:
    """Resumption state for paging through one search query.

    Created by a search call. Every page parse replaces
    `request_body.continuation` in place, so the same object can be passed
    to `next_page` repeatedly. Not safe for concurrent use.
    """

    auth_token: str
    request_body: RequestBody

    @property
    def continuation(self) -> str | None:
        return self.request_body.continuation

    @property
    def is_continuable(self) -> bool:
        """Check whether a continuation token has been captured."""
        return bool(self.request_body.continuation)

    def update_continuation(self, token: str) -> None:
        self.request_body.continuation = token

    def payload(self) -> dict:
        """Get the JSON payload for the continuation endpoint."""
        return {
            "context": self.request_body.context,
            "continuation": self.request_body.continuation,
        }
