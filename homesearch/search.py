"""
Property search pipeline
Normalizes query parameters and picks the live RentCast source or the bundled sample data
"""

import logging
from typing import Optional

import httpx

from .clients.mock_client import MockPropertyClient
from .clients.rentcast_client import DEFAULT_LIMIT, MAX_LIMIT, RentCastPropertyClient
from .config import Settings
from .models import SearchParams, SearchResult

logger = logging.getLogger(__name__)


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def normalize_search_params(
    city: Optional[str] = None,
    state: Optional[str] = None,
    zip_code: Optional[str] = None,
    limit: Optional[str] = None,
    offset: Optional[str] = None,
) -> SearchParams:
    """Build SearchParams from raw query strings. Malformed input falls back to defaults."""
    parsed_limit = _parse_int(limit)
    if not parsed_limit or parsed_limit <= 0:
        parsed_limit = DEFAULT_LIMIT
    parsed_offset = _parse_int(offset) or 0

    return SearchParams(
        city=city or None,
        state=state or None,
        zip_code=zip_code or None,
        limit=min(parsed_limit, MAX_LIMIT),
        offset=max(parsed_offset, 0),
    )


async def search_properties(
    params: SearchParams,
    api_key: Optional[str],
    http_client: Optional[httpx.AsyncClient],
    base_url: str = "https://api.rentcast.io/v1",
) -> SearchResult:
    """Search RentCast when a key and a location filter are present, otherwise the sample data.

    Any failure on the live path falls back to the sample data; nothing is raised to the caller.
    """
    if api_key and params.has_location_filter and http_client is not None:
        client = RentCastPropertyClient(http_client, api_key=api_key, base_url=base_url)
        try:
            result = await client.search(params)
        except Exception as e:  # noqa: BLE001
            logger.warning(f"RentCast search failed, falling back to sample data: {e}")
        else:
            logger.info(f"RentCast returned {result.total} properties")
            return result

    return await MockPropertyClient().search(params)


async def search_with_settings(
    params: SearchParams, settings: Settings, http_client: Optional[httpx.AsyncClient]
) -> SearchResult:
    return await search_properties(
        params,
        api_key=settings.rentcast_api_key,
        http_client=http_client,
        base_url=settings.rentcast_base_url,
    )
