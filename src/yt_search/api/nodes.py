"""Lookup helpers for walking raw ytInitialData render nodes.

Render nodes are plain dicts/lists parsed from JSON. Their shape is
undocumented and any level may be missing or null, so every access goes
through one of two helpers:

- `find()` follows a path and returns a default when any step is missing.
- `require()` follows a path and raises MalformedNodeError when any step is
  missing, naming the path that failed.
"""

from typing import Any

from ..errors import MalformedNodeError

_MISSING = object()


def _step(node: Any, key: str | int) -> Any:
    if isinstance(key, int):
        if isinstance(node, list) and -len(node) <= key < len(node):
            value = node[key]
        else:
            return _MISSING
    elif isinstance(node, dict):
        value = node.get(key)
    else:
        return _MISSING
    return _MISSING if value is None else value


def find(node: Any, *path: str | int, default: Any = None) -> Any:
    """Follow `path` through `node`, returning `default` if any step is missing or null."""
    for key in path:
        node = _step(node, key)
        if node is _MISSING:
            return default
    return node


def require(node: Any, *path: str | int, kind: str = "") -> Any:
    """Follow `path` through `node`, raising MalformedNodeError if any step is missing."""
    current = node
    for i, key in enumerate(path):
        current = _step(current, key)
        if current is _MISSING:
            raise MalformedNodeError(path[: i + 1], kind)
    return current


def join_runs(runs: list[dict] | None) -> str:
    """Concatenate the text of every run, skipping runs without text."""
    return "".join(run["text"] for run in runs or [] if isinstance(run, dict) and run.get("text"))


def renderer_kind(node: Any) -> str:
    """Get the renderer key of a render node (e.g. "videoRenderer"), for logging."""
    if isinstance(node, dict) and node:
        return next(iter(node))
    return type(node).__name__
