from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates

from .models import Number


TEMPLATES_DIR = Path(__file__).parent / "templates"


def format_usd(value: Optional[Number]) -> str:
    if value is None:
        return ""
    return f"-${abs(value):,.0f}" if value < 0 else f"${value:,.0f}"


def format_number(value: Optional[Number]) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        return f"{value:,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def pluralize_properties(total: int) -> str:
    return "property" if total == 1 else "properties"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["usd"] = format_usd
templates.env.filters["number"] = format_number
templates.env.filters["properties_word"] = pluralize_properties
