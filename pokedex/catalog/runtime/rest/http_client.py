"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import aiohttp

from ...core.exceptions import ProviderError


class HTTPClient:
    """Async HTTP client wrapper.

    Non-success statuses, transport failures and undecodable bodies are all
    raised as ProviderError with the request URL in the message.
    """

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def resolve(self, url: str) -> str:
        # Relative paths are joined onto base_url
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body."""
        url = self.resolve(url)
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                if response.status >= 400:
                    raise ProviderError(
                        f"{response.status} {response.reason}: GET {url}",
                        status_code=response.status,
                    )
                try:
                    return await response.json(content_type=None)
                except json.JSONDecodeError as e:
                    raise ProviderError(
                        f"invalid JSON payload from {url}: {e}", status_code=response.status
                    ) from e
        except aiohttp.ClientError as e:
            raise ProviderError(f"GET {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise ProviderError(f"GET {url} timed out") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
