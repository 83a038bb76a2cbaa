"""REST transport bound to one service base URL."""

from __future__ import annotations

from typing import Any

from .http_client import HTTPClient


class RESTTransport:
    """Thin GET transport over a shared HTTPClient."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        http: HTTPClient | None = None,
    ) -> None:
        self.base_url = base_url
        self._http = http or HTTPClient(base_url=base_url, timeout=timeout)

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers)

    async def close(self) -> None:
        await self._http.close()
