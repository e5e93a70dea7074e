"""
Loads cv.schema.json once per loader and keeps the parsed tree.

Concurrent callers that arrive while the first fetch is still running
await that same fetch instead of starting their own.
"""

from __future__ import annotations
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

from .config import SCHEMA_PATH
from .schema_node import SchemaNode, parse_schema

logger = logging.getLogger(__name__)

Fetcher = Callable[[], Awaitable[Any]]


class SchemaLoadError(RuntimeError):
    """The schema resource could not be retrieved or parsed."""


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class SchemaLoader:
    def __init__(self, path: str | Path | None = None, fetch: Fetcher | None = None):
        self.path = Path(path) if path is not None else SCHEMA_PATH
        self._fetch = fetch or self._fetch_file
        self._schema: Optional[SchemaNode] = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def loaded(self) -> bool:
        return self._schema is not None

    async def load(self) -> SchemaNode:
        if self._schema is not None:
            return self._schema

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._fetch_and_parse())
        pending = self._pending
        try:
            # a cancelled waiter must not cancel the fetch the others share
            schema = await asyncio.shield(pending)
        except BaseException:
            if self._pending is pending and pending.done():
                self._pending = None   # failures are not memoized
            raise

        if self._pending is pending:
            self._schema = schema
            self._pending = None
        return schema

    def reset(self) -> None:
        """Forget the cached schema; the next load() fetches again."""
        self._schema = None
        self._pending = None

    async def _fetch_file(self) -> Any:
        return await asyncio.to_thread(_read_json, self.path)

    async def _fetch_and_parse(self) -> SchemaNode:
        logger.debug("Fetching schema from %s", self.path)
        try:
            raw = await self._fetch()
        except (OSError, ValueError) as e:
            raise SchemaLoadError(f"Could not load the schema from {self.path}: {e}") from e
        if not isinstance(raw, dict):
            raise SchemaLoadError(f"Schema at {self.path} is not a JSON object")
        return parse_schema(raw)


_default_loader: Optional[SchemaLoader] = None


def get_default_loader() -> SchemaLoader:
    """Shared loader for callers that do not inject their own."""
    global _default_loader
    if _default_loader is None:
        _default_loader = SchemaLoader()
    return _default_loader


def reset_default_loader() -> None:
    global _default_loader
    _default_loader = None
