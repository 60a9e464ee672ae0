"""
FAQ Data Source

Loads the FAQ corpus, a JSON array of {"question", "answer"} records, from
either a local file or an http(s) URL.

Every failure mode (missing file, HTTP error, invalid JSON, records that do
not match the FaqEntry schema) is reported as a single FaqLoadError so the
caller has one thing to handle.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .models import FaqEntry
from ..config import settings

logger = logging.getLogger("faq.loader")

_ENTRIES_ADAPTER = TypeAdapter(List[FaqEntry])


class FaqLoadError(RuntimeError):
    """Raised when the FAQ corpus cannot be fetched or parsed."""


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class FaqLoader:
    """
    Fetches and validates FAQ records.

    Parameters
    ----------
    timeout : Optional[float]
        HTTP timeout for URL sources. Defaults to settings.faq_fetch_timeout.

    transport : Optional[httpx.AsyncBaseTransport]
        Custom transport for the HTTP client (used by tests).
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout if timeout is not None else settings.faq_fetch_timeout
        self._transport = transport

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def load(self, source: str) -> List[FaqEntry]:
        """
        Load FAQ entries from `source`.

        Raises
        ------
        FaqLoadError
            If the source is unreachable or its content is malformed.
        """
        if not source or not source.strip():
            raise FaqLoadError("No FAQ source configured.")

        if is_url(source):
            raw = await self._fetch_url(source)
        else:
            raw = self._read_file(source)

        entries = self.parse(raw)
        logger.info("Loaded %d FAQ entries from %s", len(entries), source)
        return entries

    @staticmethod
    def parse(raw: Any) -> List[FaqEntry]:
        """
        Validate decoded JSON as a list of FaqEntry records.
        """
        if not isinstance(raw, list):
            raise FaqLoadError("FAQ data must be a JSON array of records.")

        try:
            return _ENTRIES_ADAPTER.validate_python(raw)
        except ValidationError as exc:
            raise FaqLoadError(
                f"Malformed FAQ data: {exc.error_count()} invalid field(s)."
            ) from exc

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _fetch_url(self, url: str) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                resp = await client.get(url)
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(
                "FAQ fetch failed (%s): url=%s, error=%s",
                type(exc).__name__,
                url,
                str(exc),
            )
            raise FaqLoadError(f"FAQ fetch failed: {type(exc).__name__}") from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise FaqLoadError("FAQ response is not valid JSON.") from exc

    @staticmethod
    def _read_file(path: str) -> Any:
        file_path = Path(path)
        try:
            with file_path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except OSError as exc:
            raise FaqLoadError(
                f"Cannot read FAQ file {file_path}: {type(exc).__name__}"
            ) from exc
        except json.JSONDecodeError as exc:
            raise FaqLoadError(f"FAQ file {file_path} is not valid JSON.") from exc
