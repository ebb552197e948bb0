from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from ..models import SearchParams, SearchResult


class ProviderError(Exception):
    """Raised when a listings provider answers with a non-success status."""

    def __init__(self, provider: str, status_code: int, body: str) -> None:
        super().__init__(f"{provider} API error {status_code}: {body}")
        self.provider = provider
        self.status_code = status_code
        self.body = body


class BasePropertyClient(ABC):
    """Abstract client defining the interface for property listing sources."""

    provider_name = "base"

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self.http = http_client

    @abstractmethod
    async def search(self, params: SearchParams) -> SearchResult:
        """Return one page of properties matching params."""
        raise NotImplementedError

    async def _get(self, url: str, **kwargs: Any) -> httpx.Response:
        if self.http is None:
            raise RuntimeError(f"{type(self).__name__} requires an HTTP client")
        resp = await self.http.get(url, **kwargs)
        if not resp.is_success:
            raise ProviderError(self.provider_name, resp.status_code, resp.text)
        return resp
