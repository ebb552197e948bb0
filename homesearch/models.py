from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Keeps the int/float distinction of the source JSON (3 beds, 2.5 baths)
Number = Union[int, float]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Property(_Frozen):
    id: str = Field(..., description="Identifier, unique within one result set")
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    price: Optional[Number] = None
    rent_estimate: Optional[Number] = None
    bedrooms: Optional[Number] = None
    bathrooms: Optional[Number] = None
    square_footage: Optional[Number] = None
    year_built: Optional[Number] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    property_type: Optional[str] = None
    formatted_address: Optional[str] = None
    image_url: Optional[str] = None

    @property
    def display_address(self) -> str:
        if self.formatted_address:
            return self.formatted_address
        return ", ".join(part for part in (self.address, self.city, self.state, self.zip_code) if part)


class SearchParams(_Frozen):
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    limit: int = 24
    offset: int = 0
    # Reserved: property_type is forwarded to RentCast, the rest are not applied anywhere yet
    property_type: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_beds: Optional[float] = None
    min_baths: Optional[float] = None

    @property
    def has_location_filter(self) -> bool:
        return bool(self.city or self.state or self.zip_code)


class SearchResult(_Frozen):
    properties: List[Property] = []
    total: int = 0
    using_mock_data: bool


class SearchForm(_Frozen):
    """Echo of the submitted search, used to pre-fill the form."""

    city: str = ""
    state: str = ""
    zip_code: str = ""

    @classmethod
    def from_params(cls, params: SearchParams) -> "SearchForm":
        return cls(city=params.city or "", state=params.state or "", zip_code=params.zip_code or "")
