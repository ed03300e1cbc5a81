"""Exceptions raised by yt_search."""


class YtSearchError(Exception):
    """Base class for all yt_search errors."""


class UpstreamFormatError(YtSearchError):
    """Raised when a required marker or field is missing from a fetched page or response.

    This usually means YouTube changed its page format.
    """


class NoDataError(UpstreamFormatError):
    """Raised when a continuation response carries no appended items."""


class BlockedError(YtSearchError):
    """Raised when YouTube rejects a request as automated traffic (HTTP 403)."""


class MalformedNodeError(YtSearchError, LookupError):
    """Raised when a classified render node lacks a field needed to build its result."""

    def __init__(self, path: tuple[str | int, ...], node_kind: str = "") -> None:
        self.path = path
        self.node_kind = node_kind
        dotted = ".".join(str(p) for p in path)
        where = f" in {node_kind}" if node_kind else ""
        super().__init__(f"Missing field '{dotted}'{where}")
