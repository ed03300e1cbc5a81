"""YouTube search client using ytInitialData scraping and the InnerTube search endpoint."""

import logging

from ..core.models import (
    ChannelTab,
    PaginationState,
    PlaylistData,
    PlaylistVideo,
    ReelResult,
    RequestBody,
    SearchResult,
    SearchResultType,
    VideoResult,
)
from ..errors import BlockedError, MalformedNodeError, NoDataError, UpstreamFormatError
from .base import BaseYouTubeClient, safe_json
from .extractors import VIDEO_EXTRACTOR, build_thumbnail, parse_section_list
from .nodes import find, require

logger = logging.getLogger(__name__)

SEARCH_API_PATH = "youtubei/v1/search"
BLOCKED_PHRASE = "automated queries"


def _page_section(data: dict, *path: str | int, kind: str) -> list[dict]:
    """Get a structural list out of page data; missing means the page format changed."""
    try:
        return require(data, *path, kind=kind)
    except MalformedNodeError as e:
        raise UpstreamFormatError(f"Unexpected page layout: {e}") from e


class YouTubeSearchClient(BaseYouTubeClient):
    """Searches YouTube without an API key.

    `search()` scrapes the results page and returns a PaginationState that
    `next_page()` uses to fetch further results from the InnerTube search
    endpoint. The same PaginationState can be passed to `next_page()` any
    number of times; each call replaces its continuation token.
    """

    async def search(
        self,
        query: str,
        type: SearchResultType | str | None = None,
    ) -> tuple[list[SearchResult], PaginationState]:
        """Search YouTube, optionally filtering by result type.

        Args:
            query: Search query.
            type: Result type filter (video, channel, playlist or movie).

        Returns:
            The first page of results and the pagination state for next_page().
        """
        params = {"search_query": query}
        if type:
            params["sp"] = SearchResultType(type).filter_token

        page = await self.get_init_data("results", params)
        state = PaginationState(
            auth_token=page.api_token,
            request_body=RequestBody(context=page.context),
        )

        sections = _page_section(
            page.initdata,
            "contents",
            "twoColumnSearchResultsRenderer",
            "primaryContents",
            "sectionListRenderer",
            "contents",
            kind="twoColumnSearchResultsRenderer",
        )
        results = parse_section_list(sections, state)
        logger.debug(f"Search '{query}' returned {len(results)} results")
        return results, state

    async def next_page(self, state: PaginationState) -> list[SearchResult]:
        """Get the next page of results for the query that produced `state`.

        If `type` was passed to search(), results keep that filter.
        `state` is updated in place with the new continuation token.

        Raises:
            BlockedError: YouTube flagged the requests as automated.
            NoDataError: The response carried no continuation items.
        """
        if not state.is_continuable:
            logger.warning("next_page called without a continuation token")

        url = self.build_url(SEARCH_API_PATH)
        async with self.session.post(
            url, params={"key": state.auth_token}, json=state.payload()
        ) as resp:
            if resp.status == 403:
                text = await resp.text()
                if BLOCKED_PHRASE in text:
                    logger.warning("YouTube rejected the request as automated traffic")
                    raise BlockedError("YouTube blocked this client for sending automated queries")
            resp.raise_for_status()
            data = await safe_json(resp)

        action = find(data, "onResponseReceivedCommands", 0, "appendContinuationItemsAction")
        if action is None:
            raise NoDataError("No data received from YouTube; was a valid PaginationState sent?")

        items = find(action, "continuationItems", default=[])
        results = parse_section_list(items, state)
        logger.debug(f"Continuation returned {len(results)} results")
        return results

    async def get_playlist_data(self, playlist_id: str, limit: int = 0) -> PlaylistData:
        """Get the videos and metadata of a playlist.

        Args:
            playlist_id: Playlist ID (the `list=` URL parameter).
            limit: Maximum number of videos to return, 0 for all.
        """
        page = await self.get_init_data("playlist", {"list": playlist_id})
        data = page.initdata
        if not find(data, "contents"):
            raise UpstreamFormatError(f"Invalid playlist: {playlist_id}")

        kind = "playlistVideoListRenderer"
        video_items = _page_section(
            data,
            "contents",
            "twoColumnBrowseResultsRenderer",
            "tabs",
            0,
            "tabRenderer",
            "content",
            "sectionListRenderer",
            "contents",
            0,
            "itemSectionRenderer",
            "contents",
            0,
            kind,
            "contents",
            kind=kind,
        )

        items: list[PlaylistVideo] = []
        for item in video_items:
            renderer = find(item, "playlistVideoRenderer")
            if not find(renderer, "videoId"):
                continue
            items.append(
                PlaylistVideo(
                    id=renderer["videoId"],
                    title=require(renderer, "title", "runs", 0, "text", kind=kind),
                    length_text=find(renderer, "lengthText", "simpleText", default=""),
                )
            )

        if limit > 0:
            items = items[:limit]
        return PlaylistData(items=items, metadata=find(data, "metadata"))

    async def get_channel_data(self, channel_id: str) -> list[ChannelTab]:
        """Get the tabs (Home, Videos, ...) of a channel page with their raw content."""
        page = await self.get_init_data(f"channel/{channel_id}")
        tabs = _page_section(
            page.initdata,
            "contents",
            "twoColumnBrowseResultsRenderer",
            "tabs",
            kind="twoColumnBrowseResultsRenderer",
        )
        channel_tabs = []
        for tab in tabs:
            renderer = find(tab, "tabRenderer")
            if renderer is None:
                continue
            channel_tabs.append(
                ChannelTab(
                    title=find(renderer, "title", default=""),
                    content=find(renderer, "content"),
                )
            )
        return channel_tabs

    async def _home_page_grid(self) -> list[dict]:
        page = await self.get_init_data("")
        return _page_section(
            page.initdata,
            "contents",
            "twoColumnBrowseResultsRenderer",
            "tabs",
            0,
            "tabRenderer",
            "content",
            "richGridRenderer",
            "contents",
            kind="richGridRenderer",
        )

    async def get_home_page_shorts(self) -> list[ReelResult]:
        """Get the shorts shelf of the home page."""
        shelf = None
        for entry in await self._home_page_grid():
            candidate = find(entry, "richSectionRenderer", "content", "richShelfRenderer")
            if candidate and find(candidate, "title", "runs", 0, "text") == "Shorts":
                shelf = candidate
                break
        if shelf is None:
            logger.debug("No Shorts shelf on the home page")
            return []

        kind = "reelItemRenderer"
        reels = []
        for item in find(shelf, "contents", default=[]):
            reel = find(item, "richItemRenderer", "content", kind)
            if reel is None:
                continue
            reels.append(
                ReelResult(
                    id=require(reel, "videoId", kind=kind),
                    thumbnail=build_thumbnail(reel, "thumbnail", "thumbnails", 0, kind=kind),
                    title=require(reel, "headline", "simpleText", kind=kind),
                    inline_playback_endpoint=find(reel, "inlinePlaybackEndpoint", default={}),
                )
            )
        return reels

    async def get_home_page_videos(self, limit: int = 0) -> list[VideoResult]:
        """Get the videos of the home page grid.

        Args:
            limit: Maximum number of videos to return, 0 for all.
        """
        videos: list[VideoResult] = []
        for entry in await self._home_page_grid():
            content = find(entry, "richItemRenderer", "content")
            if content is not None and VIDEO_EXTRACTOR.classify(content):
                videos.append(VIDEO_EXTRACTOR.construct(content))
        if limit > 0:
            videos = videos[:limit]
        return videos
