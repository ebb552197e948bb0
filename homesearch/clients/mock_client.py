from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import httpx

from .base import BasePropertyClient
from .mock_data import MOCK_PROPERTIES
from ..models import Property, SearchParams, SearchResult

logger = logging.getLogger(__name__)


def filter_properties(
    properties: Sequence[Property],
    city: Optional[str] = None,
    state: Optional[str] = None,
    zip_code: Optional[str] = None,
) -> List[Property]:
    """Filter without touching the input; only the filters that are set apply."""
    result = list(properties)
    if city:
        needle = city.lower()
        result = [p for p in result if needle in p.city.lower()]
    if state:
        wanted = state.upper()
        result = [p for p in result if p.state.upper() == wanted]
    if zip_code:
        result = [p for p in result if p.zip_code == zip_code]
    return result


class MockPropertyClient(BasePropertyClient):
    """Serves the bundled sample listings with local filtering and pagination."""

    provider_name = "mock"

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        properties: Sequence[Property] = MOCK_PROPERTIES,
    ) -> None:
        super().__init__(http_client)
        self.properties = properties

    async def search(self, params: SearchParams) -> SearchResult:
        filtered = filter_properties(self.properties, params.city, params.state, params.zip_code)
        total = len(filtered)
        page = filtered[params.offset : params.offset + params.limit]
        logger.debug(f"Mock search matched {total} properties, returning {len(page)}")
        return SearchResult(properties=page, total=total, using_mock_data=True)
