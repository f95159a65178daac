"""Shared async HTTP helpers used by the compat-table fetcher and release directory.

Encapsulates session lifecycle plus request/decode error handling so callers
only ever see ``RetrievalError``. No retries are attempted here; retry policy
belongs to whoever calls the public API.
"""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp

from constants import Constants
from common.errors import RetrievalError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


class AsyncHttpClient:
    """Thin wrapper around an aiohttp session for fetching JSON resources."""

    def __init__(
        self,
        timeout: int = Constants.REQUEST_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
    ):
        """Initialize the client.

        Args:
            timeout: Total request timeout in seconds.
            headers: Extra headers sent with every request.
        """
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = {"User-Agent": Constants.USER_AGENT, "Accept": "application/json"}
        if headers:
            self._headers.update(headers)
        self._session: Optional[aiohttp.ClientSession] = None

    async def start(self) -> None:
        """Start the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                headers=self._headers,
            )

    async def stop(self) -> None:
        """Stop the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def get_json(self, url: str, *, context: str) -> Any:
        """GET ``url`` and decode the body as JSON.

        Args:
            url: Target URL.
            context: Human-readable source tag for logs (e.g., "compat-table").

        Returns:
            The decoded JSON document.

        Raises:
            RetrievalError: On transport failure, timeout, non-2xx status or
                an undecodable body. The original exception is chained.
        """
        if self._session is None:
            await self.start()
        assert self._session is not None
        safe_target = safe_url(url)

        with Timer() as t:
            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP request",
                    extra=extra_context(
                        event="http_request",
                        component="http_client",
                        action="GET",
                        target=safe_target,
                        context=context,
                    ),
                )
            try:
                response = await self._session.get(url)
            except aiohttp.ClientError as exc:
                logger.error("%s connection error: %s", context, exc)
                raise RetrievalError(f"{context} connection error: {exc}", url=url) from exc
            except asyncio.TimeoutError as exc:
                logger.error(
                    "%s request timed out after %s seconds",
                    context,
                    self._timeout.total,
                )
                raise RetrievalError(f"{context} request timed out", url=url) from exc

            try:
                if response.status < 200 or response.status >= 300:
                    logger.warning(
                        "HTTP non-2xx received",
                        extra=extra_context(
                            event="http_response",
                            component="http_client",
                            outcome="non_2xx",
                            status_code=response.status,
                            target=safe_target,
                            context=context,
                        ),
                    )
                    raise RetrievalError(
                        f"{context} responded with HTTP {response.status}", url=url
                    )
                text = await response.text()
            except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as exc:
                raise RetrievalError(f"{context} failed reading response: {exc}", url=url) from exc
            finally:
                response.release()

        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            if is_debug_enabled(logger):
                logger.debug(
                    "JSON decode error",
                    extra=extra_context(
                        event="parse",
                        component="http_client",
                        action="get_json",
                        outcome="json_decode_error",
                        target=safe_target,
                    ),
                )
            raise RetrievalError(f"{context} returned invalid JSON: {exc}", url=url) from exc

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response ok",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success",
                    status_code=response.status,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                    context=context,
                ),
            )
        return parsed

    async def __aenter__(self) -> "AsyncHttpClient":
        """Async context manager entry."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.stop()
