"""Settings for yt_search clients."""

from dataclasses import dataclass, fields

DEFAULT_BASE_URL = "https://www.youtube.com"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


@dataclass
class SearchSettings:
    """Connection settings for YouTubeSearchClient.

    Held in memory only; nothing is read from or written to disk.
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = "en-US,en;q=0.9"
    language: str = ""  # hl= query hint, empty = let YouTube decide
    region: str = ""  # gl= query hint

    @property
    def headers(self) -> dict[str, str]:
        """Get the HTTP headers sent with every request."""
        return {
            "User-Agent": self.user_agent,
            "Accept-Language": self.accept_language,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        }

    @property
    def locale_params(self) -> dict[str, str]:
        """Get the hl/gl query parameters, skipping unset ones."""
        params = {}
        if self.language:
            params["hl"] = self.language
        if self.region:
            params["gl"] = self.region
        return params

    @classmethod
    def from_dict(cls, data: dict) -> "SearchSettings":
        """Create SearchSettings from a dictionary with validation.

        Unknown keys are ignored; values that are not non-empty strings
        (empty strings allowed for language/region) fall back to defaults.
        """
        settings = cls()
        for f in fields(cls):
            value = data.get(f.name)
            if not isinstance(value, str):
                continue
            if not value and f.name not in ("language", "region"):
                continue
            setattr(settings, f.name, value)
        settings.base_url = settings.base_url.rstrip("/")
        return settings
