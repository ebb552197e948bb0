from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

import httpx

from .base import BasePropertyClient
from ..models import Number, Property, SearchParams, SearchResult

logger = logging.getLogger(__name__)

MAX_LIMIT = 50
DEFAULT_LIMIT = 24


class RentCastPropertyClient(BasePropertyClient):
    """RentCast property records client.

    Description:
    - Queries GET /properties with city/state/zipCode/limit/offset/propertyType
    - The API key travels in the X-Api-Key header, never in the URL
    - Results are already paginated by RentCast and are not sliced again here
    """

    provider_name = "RentCast"

    def __init__(self, http_client: httpx.AsyncClient, api_key: str, base_url: str) -> None:
        super().__init__(http_client)
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def _headers(self) -> Dict[str, str]:
        return {"Accept": "application/json", "X-Api-Key": self.api_key}

    @staticmethod
    def build_query(params: SearchParams) -> Dict[str, Any]:
        query: Dict[str, Any] = {}
        if params.city:
            query["city"] = params.city
        if params.state:
            query["state"] = params.state
        if params.zip_code:
            query["zipCode"] = params.zip_code
        query["limit"] = min(params.limit or DEFAULT_LIMIT, MAX_LIMIT)
        if params.offset:
            query["offset"] = params.offset
        if params.property_type:
            query["propertyType"] = params.property_type
        return query

    async def search(self, params: SearchParams) -> SearchResult:
        url = f"{self.base_url}/properties"
        resp = await self._get(url, headers=self._headers(), params=self.build_query(params))
        data = resp.json()

        if isinstance(data, dict) and isinstance(data.get("properties"), list):
            raw_list = data["properties"]
        elif isinstance(data, list):
            raw_list = data
        else:
            logger.info(f"Unexpected RentCast response shape ({type(data).__name__}), treating as no results")
            raw_list = []

        properties: List[Property] = []
        for index, record in enumerate(raw_list):
            if not isinstance(record, dict):
                logger.debug(f"Skipping non-object RentCast record at position {index}")
                continue
            properties.append(map_rentcast_record(record, index))
        return SearchResult(properties=properties, total=len(properties), using_mock_data=False)


def _number(value: Any) -> Optional[Number]:
    # bool is an int subclass; NaN can slip through json.loads
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def map_rentcast_record(record: Dict[str, Any], index: int) -> Property:
    """Map one raw RentCast property record onto a Property."""
    joined = ", ".join(
        str(part)
        for part in (record.get("addressLine1"), record.get("city"), record.get("state"), record.get("zipCode"))
        if part
    )
    formatted = _text(record.get("formattedAddress")) or joined

    rent = _number(record.get("rentEstimate"))
    if rent is None:
        estimates = record.get("rentEstimates")
        if isinstance(estimates, dict):
            rent = _number(estimates.get("amount"))

    zip_code = record.get("zipCode")
    property_type = record.get("propertyType")
    raw_id = record.get("id")

    return Property(
        id=str(raw_id) if raw_id else f"rc-{index}",
        address=_text(record.get("addressLine1")) or _text(record.get("address")),
        city=_text(record.get("city")),
        state=_text(record.get("state")),
        zip_code="" if zip_code is None else str(zip_code),
        price=_number(record.get("price")),
        rent_estimate=rent,
        bedrooms=_number(record.get("bedrooms")),
        bathrooms=_number(record.get("bathrooms")),
        square_footage=_number(record.get("squareFootage")),
        year_built=_number(record.get("yearBuilt")),
        latitude=_number(record.get("latitude")),
        longitude=_number(record.get("longitude")),
        property_type=property_type if isinstance(property_type, str) else None,
        formatted_address=formatted or None,
    )
