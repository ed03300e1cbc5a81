"""Base client: HTTP session handling and ytInitialData page parsing."""

import asyncio
import json
import logging
from dataclasses import dataclass

import aiohttp

from ..core.settings import SearchSettings
from ..errors import UpstreamFormatError

logger = logging.getLogger(__name__)

# Markers searched for in the page HTML
INITIAL_DATA_MARKER = "var ytInitialData ="
API_KEY_MARKER = "innertubeApiKey"
CONTEXT_MARKER = "INNERTUBE_CONTEXT\""  # trailing quote skips INNERTUBE_CONTEXT_CLIENT_NAME etc.


async def safe_json(resp: aiohttp.ClientResponse) -> dict | list | None:
    """Safely parse JSON from response, returning None on error.

    This handles HTML error pages (ContentTypeError) and malformed JSON.
    """
    try:
        return await resp.json()
    except (aiohttp.ContentTypeError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to parse JSON response: {e}")
        return None


@dataclass
class InitData:
    """Bootstrap data embedded in a YouTube page."""

    initdata: dict
    api_token: str
    context: dict


def _loads(text: str, marker: str) -> dict:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise UpstreamFormatError(f"{marker} is not valid JSON: {e}") from e


def extract_initial_data(html: str) -> dict:
    """Extract the ytInitialData JSON object from page HTML."""
    _, found, rest = html.partition(INITIAL_DATA_MARKER)
    if not found:
        raise UpstreamFormatError("ytInitialData not present in page")
    # The assignment runs up to the closing script tag and ends with ';'
    data = rest.split("</script>", 1)[0].strip()
    if data.endswith(";"):
        data = data[:-1]
    return _loads(data, "ytInitialData")


def extract_api_key(html: str) -> str:
    """Extract the InnerTube API key from page HTML."""
    _, found, rest = html.partition(API_KEY_MARKER)
    if not found:
        raise UpstreamFormatError("innertubeApiKey not present in page")
    # Looks like: innertubeApiKey":"AIza...",
    parts = rest.strip().split(",", 1)[0].split('"')
    if len(parts) < 3 or not parts[2]:
        raise UpstreamFormatError("innertubeApiKey present but has no value")
    return parts[2]


def extract_context(html: str) -> dict:
    """Extract the INNERTUBE_CONTEXT object echoed back on continuation requests."""
    _, found, rest = html.partition(CONTEXT_MARKER)
    if not found:
        raise UpstreamFormatError("INNERTUBE_CONTEXT not present in page")
    # Looks like: INNERTUBE_CONTEXT":{...},"INNERTUBE_...
    rest = rest.lstrip()
    if not rest.startswith(":"):
        raise UpstreamFormatError("INNERTUBE_CONTEXT present but has no value")
    rest = rest[1:].lstrip()
    if not rest.startswith("{"):
        raise UpstreamFormatError("INNERTUBE_CONTEXT present but is not an object")
    try:
        context, _ = json.JSONDecoder().raw_decode(rest)
    except json.JSONDecodeError as e:
        raise UpstreamFormatError(f"INNERTUBE_CONTEXT is not valid JSON: {e}") from e
    return context


def parse_init_data(html: str) -> InitData:
    """Parse the bootstrap data, API key and request context out of a page."""
    return InitData(
        initdata=extract_initial_data(html),
        api_token=extract_api_key(html),
        context=extract_context(html),
    )


class BaseYouTubeClient:
    """Owns the aiohttp session and fetches YouTube pages.

    Can be used as an async context manager, which closes the session on exit.
    """

    def __init__(
        self,
        settings: SearchSettings | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.settings = settings or SearchSettings()
        self._session = session

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create the HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(headers=self.settings.headers)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            try:
                await self._session.close()
                # Allow time for underlying connections to fully close
                await asyncio.sleep(0.1)
            except RuntimeError as e:
                # Session may be attached to a different event loop
                if "attached to a different loop" in str(e):
                    logger.debug(f"Session attached to different loop, skipping close: {e}")
                else:
                    raise
            finally:
                self._session = None

    async def __aenter__(self) -> "BaseYouTubeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def build_url(self, path: str) -> str:
        return f"{self.settings.base_url}/{path.lstrip('/')}"

    async def fetch_page(self, path: str, params: dict | None = None) -> str:
        """GET a page relative to the base URL and return its HTML."""
        url = self.build_url(path)
        query = {**(params or {}), **self.settings.locale_params}
        logger.debug(f"Fetching {url} {query}")
        async with self.session.get(url, params=query or None) as resp:
            resp.raise_for_status()
            return await resp.text()

    async def get_init_data(self, path: str, params: dict | None = None) -> InitData:
        """Fetch a page and parse its bootstrap data."""
        html = await self.fetch_page(path, params)
        return parse_init_data(html)
