"""Shared test fixtures for yt_search tests."""

import json

import aiohttp
import pytest

# --- Canned render nodes ---


def make_thumbs(url: str = "https://i.ytimg.com/vi/x/hq.jpg") -> dict:
    return {"thumbnails": [{"url": url, "width": 360, "height": 202}]}


def make_video_node(video_id: str = "dQw4w9WgXcQ", live: bool = False, **overrides) -> dict:
    renderer = {
        "videoId": video_id,
        "thumbnail": make_thumbs(),
        "title": {"runs": [{"text": "Never Gonna Give You Up"}]},
        "ownerText": {"runs": [{"text": "Rick Astley"}]},
        "channelThumbnailSupportedRenderers": {
            "channelThumbnailWithLinkRenderer": {
                "thumbnail": make_thumbs("https://yt3.ggpht.com/c")
            }
        },
    }
    if live:
        renderer["badges"] = [{"metadataBadgeRenderer": {"style": "BADGE_STYLE_TYPE_LIVE_NOW"}}]
        renderer["shortViewCountText"] = {"runs": [{"text": "1.2K"}, {"text": " watching"}]}
        renderer["viewCountText"] = {"runs": [{"text": "1,234"}, {"text": " watching"}]}
    else:
        renderer["lengthText"] = {"simpleText": "3:33"}
        renderer["shortViewCountText"] = {"simpleText": "1.5B views"}
        renderer["viewCountText"] = {"simpleText": "1,500,000,000 views"}
    renderer.update(overrides)
    return {"videoRenderer": renderer}


def make_channel_node(channel_id: str = "UCuAXFkgsw1L7xaCfnd5JJOw", **overrides) -> dict:
    renderer = {
        "channelId": channel_id,
        "thumbnail": make_thumbs("https://yt3.ggpht.com/rick"),
        "title": {"simpleText": "Rick Astley"},
        "descriptionSnippet": {"runs": [{"text": "Official "}, {"text": "channel"}]},
        "videoCountText": {"simpleText": "4.2M subscribers"},
    }
    renderer.update(overrides)
    return {"channelRenderer": renderer}


def make_playlist_node(playlist_id: str = "PL1234", **overrides) -> dict:
    renderer = {
        "playlistId": playlist_id,
        "thumbnails": [make_thumbs("https://i.ytimg.com/pl.jpg")],
        "title": {"simpleText": "80s Hits"},
        "videos": [
            {
                "childVideoRenderer": {
                    "videoId": "a1",
                    "title": {"simpleText": "Take On Me"},
                    "lengthText": {"simpleText": "3:46"},
                }
            },
            {
                "childVideoRenderer": {
                    "videoId": "b2",
                    "title": {"simpleText": "Africa"},
                    "lengthText": {"simpleText": "4:55"},
                }
            },
        ],
    }
    renderer.update(overrides)
    return {"playlistRenderer": renderer}


def make_continuation_node(token: str) -> dict:
    return {
        "continuationItemRenderer": {
            "continuationEndpoint": {"continuationCommand": {"token": token}}
        }
    }


def make_item_section(*items: dict) -> dict:
    return {"itemSectionRenderer": {"contents": list(items)}}


def make_results_page(sections: list[dict]) -> dict:
    return {
        "contents": {
            "twoColumnSearchResultsRenderer": {
                "primaryContents": {"sectionListRenderer": {"contents": sections}}
            }
        }
    }


def make_html(
    initdata: dict | None = None,
    api_key: str | None = "AIzaTestKey",
    context: dict | None = None,
) -> str:
    """Build a page resembling a YouTube response with the bootstrap markers."""
    parts = ["<html><head>"]
    if api_key is not None:
        ctx = context if context is not None else {"client": {"clientName": "WEB", "hl": "en"}}
        parts.append(
            "<script>ytcfg.set({"
            f'"innertubeApiKey":"{api_key}","INNERTUBE_CONTEXT":{json.dumps(ctx)},'
            '"INNERTUBE_CLIENT_VERSION":"2.20250120.01.00"});</script>'
        )
    elif context is not None:
        parts.append(f'<script>ytcfg.set({{"INNERTUBE_CONTEXT":{json.dumps(context)}}});</script>')
    if initdata is not None:
        parts.append(f"<script>var ytInitialData = {json.dumps(initdata)};</script>")
    parts.append("</head><body></body></html>")
    return "".join(parts)


# --- Fake aiohttp session ---


class FakeResponse:
    def __init__(self, status: int = 200, text: str = "", json_data=None) -> None:
        self.status = status
        self._text = text
        self._json = json_data

    async def text(self) -> str:
        return self._text

    async def json(self):
        return self._json

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                None, (), status=self.status, message=f"HTTP {self.status}"
            )

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None


class FakeSession:
    """Records requests and replays queued responses in order."""

    def __init__(self, *responses: FakeResponse) -> None:
        self.responses = list(responses)
        self.requests: list[tuple[str, str, dict]] = []
        self.closed = False

    def _next(self, method: str, url: str, kwargs: dict) -> FakeResponse:
        self.requests.append((method, url, kwargs))
        return self.responses.pop(0)

    def get(self, url: str, **kwargs) -> FakeResponse:
        return self._next("GET", url, kwargs)

    def post(self, url: str, **kwargs) -> FakeResponse:
        return self._next("POST", url, kwargs)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def video_node():
    return make_video_node()


@pytest.fixture
def live_video_node():
    return make_video_node(video_id="live123", live=True)


@pytest.fixture
def channel_node():
    return make_channel_node()


@pytest.fixture
def playlist_node():
    return make_playlist_node()


@pytest.fixture
def search_html(video_node, channel_node, playlist_node):
    page = make_results_page(
        [
            make_item_section(video_node, {"adSlotRenderer": {}}, channel_node, playlist_node),
            make_continuation_node("T1"),
        ]
    )
    return make_html(page)
