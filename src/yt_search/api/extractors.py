"""Result extractors for ytInitialData render nodes.

Each extractor recognizes one renderer kind and converts it to a result
model. They are tried in a fixed order (video, channel, playlist) and the
first one whose `classify()` accepts a node builds the result.
"""

import logging
from abc import ABC, abstractmethod

from ..core.models import (
    ChannelResult,
    PaginationState,
    PlaylistResult,
    PlaylistVideo,
    SearchResult,
    Thumbnail,
    VideoChannel,
    VideoResult,
    ViewsText,
)
from ..errors import MalformedNodeError
from .nodes import find, join_runs, renderer_kind, require

logger = logging.getLogger(__name__)

LIVE_BADGE_STYLE = "BADGE_STYLE_TYPE_LIVE_NOW"
LIVE_OVERLAY_STYLE = "LIVE"


def build_thumbnail(node: dict, *path: str | int, kind: str) -> Thumbnail:
    """Build the thumbnail at `path`. A url is required, width and height default to 0."""
    entry = require(node, *path, kind=kind)
    return Thumbnail(
        url=require(node, *path, "url", kind=kind),
        width=find(entry, "width", default=0),
        height=find(entry, "height", default=0),
    )


def build_thumbnails(node: dict, *path: str | int, kind: str) -> tuple[Thumbnail, ...]:
    """Build every thumbnail of the list at `path`."""
    entries = require(node, *path, kind=kind)
    if not isinstance(entries, list):
        raise MalformedNodeError(path, kind)
    return tuple(build_thumbnail(node, *path, i, kind=kind) for i in range(len(entries)))


class ResultExtractor(ABC):
    """Converts one renderer kind into a search result."""

    @abstractmethod
    def classify(self, node: dict) -> bool:
        """Check whether this extractor can build a result from `node`."""
        ...

    @abstractmethod
    def construct(self, node: dict) -> SearchResult:
        """Build a result from `node`.

        Only call this after `classify()` accepted the node. Missing
        required fields raise MalformedNodeError.
        """
        ...


class VideoExtractor(ResultExtractor):
    """Handles `videoRenderer` and `playlistVideoRenderer` nodes."""

    @staticmethod
    def _renderer(node: dict) -> dict | None:
        return find(node, "videoRenderer") or find(node, "playlistVideoRenderer")

    @staticmethod
    def is_live(renderer: dict) -> bool:
        """Check for a "LIVE NOW" badge or a LIVE time-status overlay."""
        for badge in find(renderer, "badges", default=[]):
            if find(badge, "metadataBadgeRenderer", "style") == LIVE_BADGE_STYLE:
                return True
        for overlay in find(renderer, "thumbnailOverlays", default=[]):
            if find(overlay, "thumbnailOverlayTimeStatusRenderer", "style") == LIVE_OVERLAY_STYLE:
                return True
        return False

    def classify(self, node: dict) -> bool:
        return bool(find(self._renderer(node), "videoId"))

    def construct(self, node: dict) -> VideoResult:
        kind = "videoRenderer" if find(node, "videoRenderer") else "playlistVideoRenderer"
        vr = require(node, kind, kind=kind)
        live = self.is_live(vr)

        channel = VideoChannel(
            title=find(vr, "ownerText", "runs", 0, "text"),
            thumbnails=build_thumbnails(
                vr,
                "channelThumbnailSupportedRenderers",
                "channelThumbnailWithLinkRenderer",
                "thumbnail",
                "thumbnails",
                kind=kind,
            ),
        )

        if live:
            # Live view counts come split into runs ("1,234", " watching")
            views_text = ViewsText(
                short=self._concat_runs(vr, "shortViewCountText", kind),
                long=self._concat_runs(vr, "viewCountText", kind),
            )
            length_text = None
        else:
            views_text = ViewsText(
                short=require(vr, "shortViewCountText", "simpleText", kind=kind),
                long=require(vr, "viewCountText", "simpleText", kind=kind),
            )
            length_text = require(vr, "lengthText", "simpleText", kind=kind)

        return VideoResult(
            id=require(vr, "videoId", kind=kind),
            thumbnails=build_thumbnails(vr, "thumbnail", "thumbnails", kind=kind),
            title=require(vr, "title", "runs", 0, "text", kind=kind),
            channel=channel,
            live=live,
            views_text=views_text,
            length_text=length_text,
        )

    @staticmethod
    def _concat_runs(vr: dict, field_name: str, kind: str) -> str:
        runs = require(vr, field_name, "runs", kind=kind)
        return "".join(require(run, "text", kind=kind) for run in runs)


class ChannelExtractor(ResultExtractor):
    """Handles `channelRenderer` nodes."""

    @staticmethod
    def get_description(renderer: dict) -> str | None:
        """Join the description snippet runs; None if the card has no snippet."""
        runs = find(renderer, "descriptionSnippet", "runs")
        if runs is None:
            return None
        return join_runs(runs)

    def classify(self, node: dict) -> bool:
        return find(node, "channelRenderer") is not None

    def construct(self, node: dict) -> ChannelResult:
        kind = "channelRenderer"
        cr = require(node, kind, kind=kind)
        return ChannelResult(
            id=require(cr, "channelId", kind=kind),
            thumbnails=build_thumbnails(cr, "thumbnail", "thumbnails", kind=kind),
            title=require(cr, "title", "simpleText", kind=kind),
            description=self.get_description(cr),
            # YouTube puts the subscriber count in videoCountText on channel cards
            subscribers_text=require(cr, "videoCountText", "simpleText", kind=kind),
        )


class PlaylistExtractor(ResultExtractor):
    """Handles `playlistRenderer` nodes."""

    def classify(self, node: dict) -> bool:
        return bool(find(node, "playlistRenderer", "playlistId"))

    def construct(self, node: dict) -> PlaylistResult:
        kind = "playlistRenderer"
        pr = require(node, kind, kind=kind)
        videos = []
        for entry in require(pr, "videos", kind=kind):
            child = require(entry, "childVideoRenderer", kind=kind)
            videos.append(
                PlaylistVideo(
                    id=require(child, "videoId", kind=kind),
                    title=require(child, "title", "simpleText", kind=kind),
                    length_text=require(child, "lengthText", "simpleText", kind=kind),
                )
            )
        return PlaylistResult(
            id=require(pr, "playlistId", kind=kind),
            thumbnail=build_thumbnails(pr, "thumbnails", 0, "thumbnails", kind=kind),
            title=require(pr, "title", "simpleText", kind=kind),
            videos=tuple(videos),
        )


VIDEO_EXTRACTOR = VideoExtractor()
CHANNEL_EXTRACTOR = ChannelExtractor()
PLAYLIST_EXTRACTOR = PlaylistExtractor()

# Priority order: first match wins
EXTRACTORS: tuple[ResultExtractor, ...] = (
    VIDEO_EXTRACTOR,
    CHANNEL_EXTRACTOR,
    PLAYLIST_EXTRACTOR,
)


def extract_result(node: dict) -> SearchResult | None:
    """Convert one item node, or return None if no extractor recognizes it."""
    for extractor in EXTRACTORS:
        if extractor.classify(node):
            return extractor.construct(node)
    return None


def extract_results(items: list[dict]) -> list[SearchResult]:
    """Convert every recognized item node, skipping ads, shelves and other renderers.

    A recognized node that is missing a required field aborts the whole
    list with MalformedNodeError.
    """
    results: list[SearchResult] = []
    for item in items:
        result = extract_result(item)
        if result is None:
            logger.debug(f"Skipping unrecognized node: {renderer_kind(item)}")
            continue
        results.append(result)
    return results


def get_continuation_token(section: dict) -> str | None:
    """Get the token of a `continuationItemRenderer` section, if it is one."""
    renderer = find(section, "continuationItemRenderer")
    if renderer is None:
        return None
    return require(
        renderer,
        "continuationEndpoint",
        "continuationCommand",
        "token",
        kind="continuationItemRenderer",
    )


def parse_section_list(sections: list[dict], state: PaginationState) -> list[SearchResult]:
    """Extract results from a section list and capture its continuation token.

    `continuationItemRenderer` sections replace the token in `state`
    (the last one on the page wins); `itemSectionRenderer` sections are
    converted with `extract_results`.
    """
    results: list[SearchResult] = []
    for section in sections:
        token = get_continuation_token(section)
        if token is not None:
            state.update_continuation(token)
            logger.debug("Captured continuation token")
            continue
        contents = find(section, "itemSectionRenderer", "contents")
        if contents is not None:
            results.extend(extract_results(contents))
    return results
