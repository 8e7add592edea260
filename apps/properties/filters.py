"""Search-page filtering, sorting and pagination of property listings.

Query values are parsed leniently: numeric filters accept a leading number
("3beds" is 3) and anything unparseable switches the filter off.
"""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Mapping, Sequence, Tuple

PROPERTIES_PER_PAGE = 25
RELATED_LIMIT = 4

SORT_OPTIONS = ("asc price", "desc price", "asc date", "desc date")

_INT_PREFIX = re.compile(r"\s*[-+]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

def parse_int(value, default: int = 0) -> int:
    if value is None:
        return default
    match = _INT_PREFIX.match(str(value))
    if not match:
        return default
    return int(match.group()) or default

def parse_float(value, default: float = 0.0) -> float:
    if value is None:
        return default
    match = _FLOAT_PREFIX.match(str(value))
    if not match:
        return default
    return float(match.group()) or default

@dataclass(frozen=True)
class SearchParams:
    query: str = ""
    type: str = ""
    category: str = ""
    state: str = ""
    bedrooms: int = 0
    bathrooms: int = 0
    toilets: int = 0
    area: int = 0
    feature: str = ""
    min_price: float = 0.0
    max_price: float = math.inf
    sort: str = ""
    page: int = 1

    @classmethod
    def from_query(cls, params: Mapping) -> "SearchParams":
        page = parse_int(params.get("page"), 1)
        return cls(
            query=params.get("query") or params.get("search") or "",
            type=params.get("type") or "",
            category=params.get("category") or "",
            state=params.get("state") or "",
            bedrooms=parse_int(params.get("bedrooms")),
            bathrooms=parse_int(params.get("bathrooms")),
            toilets=parse_int(params.get("toilets")),
            area=parse_int(params.get("area")),
            feature=params.get("feature") or "",
            min_price=parse_float(params.get("min")),
            max_price=parse_float(params.get("max"), math.inf),
            sort=params.get("sort") or "",
            page=page if page > 0 else 1,
        )

def _contains(value, needle: str) -> bool:
    return bool(value) and needle in str(value).lower()

def _matches_query(prop, needle: str) -> bool:
    return any(
        _contains(getattr(prop, field, None), needle)
        for field in ("title", "address", "city", "state")
    )

def _at_least(value, minimum) -> bool:
    try:
        return float(value) >= minimum
    except (TypeError, ValueError):
        return False

def filter_properties(properties: Sequence, params: SearchParams) -> List:
    filtered = list(properties)

    if params.type:
        filtered = [p for p in filtered if p.type == params.type]
    if params.category:
        filtered = [p for p in filtered if p.category == params.category]
    if params.state:
        filtered = [p for p in filtered if p.state == params.state]
    if params.bedrooms:
        filtered = [p for p in filtered if _at_least(p.bedrooms, params.bedrooms)]
    if params.bathrooms:
        filtered = [p for p in filtered if _at_least(p.bathrooms, params.bathrooms)]
    if params.toilets:
        filtered = [p for p in filtered if _at_least(p.toilets, params.toilets)]
    if params.area:
        filtered = [p for p in filtered if _at_least(p.area, params.area)]
    if params.feature:
        filtered = [p for p in filtered if params.feature in (p.features or [])]

    if params.query:
        needle = params.query.lower()
        filtered = [p for p in filtered if _matches_query(p, needle)]

    filtered = [
        p for p in filtered
        if p.price is not None and params.min_price <= p.price <= params.max_price
    ]

    return sort_properties(filtered, params.sort)

def sort_properties(properties: List, sort: str) -> List:
    if sort == "asc price":
        return sorted(properties, key=lambda p: p.price)
    if sort == "desc price":
        return sorted(properties, key=lambda p: p.price, reverse=True)
    if sort == "asc date":
        return sorted(properties, key=lambda p: p.created_at or datetime.min)
    if sort == "desc date":
        return sorted(properties, key=lambda p: p.created_at or datetime.min, reverse=True)
    return properties

def paginate(items: Sequence, page: int, per_page: int = PROPERTIES_PER_PAGE) -> Tuple[List, int]:
    """Return the items of ``page`` and the total page count."""
    total_pages = math.ceil(len(items) / per_page)
    start = (page - 1) * per_page
    return list(items[start:start + per_page]), total_pages

def related_properties(prop, candidates: Sequence, limit: int = RELATED_LIMIT) -> List:
    return [
        other for other in candidates
        if other.id != prop.id and (other.category == prop.category or other.city == prop.city)
    ][:limit]
