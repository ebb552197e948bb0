from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from .config import Settings, get_settings
from .models import SearchForm, SearchParams, SearchResult
from .rendering import templates
from .search import normalize_search_params, search_with_settings


router = APIRouter()


def get_http_client(request: Request) -> Optional[httpx.AsyncClient]:
    # Created by the application lifespan; absent when the app runs without it
    return getattr(request.app.state, "http_client", None)


def get_search_params(
    city: Optional[str] = Query(default=None),
    state: Optional[str] = Query(default=None),
    zip_code: Optional[str] = Query(default=None, alias="zipCode"),
    limit: Optional[str] = Query(default=None, description="Page size, 1-50 (default 24)"),
    offset: Optional[str] = Query(default=None, description="Number of results to skip"),
) -> SearchParams:
    # Raw strings on purpose: malformed numbers fall back to defaults instead of a 422
    return normalize_search_params(city=city, state=state, zip_code=zip_code, limit=limit, offset=offset)


@router.get("/health", tags=["system"])
async def health() -> dict:
    return {"status": "ok"}


@router.get("/debug/config", tags=["debug"])
async def debug_config(settings: Settings = Depends(get_settings)) -> dict:
    """Debug endpoint to check configuration (without exposing sensitive data)"""
    return {
        "rentcast_base_url": settings.rentcast_base_url,
        "has_rentcast_api_key": settings.has_rentcast_api_key,
        "http_timeout_seconds": settings.http_timeout_seconds,
        "environment": settings.environment,
    }


@router.get(
    "/v1/properties",
    response_model=SearchResult,
    response_model_exclude_none=True,
    tags=["properties"],
)
async def list_properties(
    params: SearchParams = Depends(get_search_params),
    settings: Settings = Depends(get_settings),
    http_client: Optional[httpx.AsyncClient] = Depends(get_http_client),
) -> SearchResult:
    return await search_with_settings(params, settings, http_client)


@router.get("/", response_class=HTMLResponse, tags=["pages"])
async def home(
    request: Request,
    params: SearchParams = Depends(get_search_params),
    settings: Settings = Depends(get_settings),
    http_client: Optional[httpx.AsyncClient] = Depends(get_http_client),
):
    result = await search_with_settings(params, settings, http_client)
    return templates.TemplateResponse(
        request,
        "home.html",
        {"result": result, "search": SearchForm.from_params(params)},
    )
