"""Shape the keyword arguments for each boto3 ``location`` client call."""
from typing import Dict, Optional

from placeindex.config import Settings
from placeindex.exceptions import ConfigurationError
from placeindex.models import GeoPoint, SearchFilter


def _index_name(settings: Settings, index_name: Optional[str] = None) -> str:
    name = index_name or settings.index_name
    if not name:
        raise ConfigurationError("index name not set")
    return name


def build_create_index_args(settings: Settings, description: str, tags: Dict[str, str]) -> dict:
    args = {
        "IndexName": _index_name(settings),
        "DataSource": settings.data_source,
        "DataSourceConfiguration": {"IntendedUse": settings.intended_use},
        "Description": description or "",
        "PricingPlan": settings.pricing_plan,
    }
    if tags:
        args["Tags"] = dict(tags)
    return args


def build_delete_index_args(settings: Settings) -> dict:
    return {"IndexName": _index_name(settings)}


def build_describe_index_args(settings: Settings, index_name: Optional[str] = None) -> dict:
    return {"IndexName": _index_name(settings, index_name)}


def build_list_indexes_args(settings: Settings) -> dict:
    return {}


def build_search_position_args(settings: Settings, point: GeoPoint, max_results: Optional[int] = None) -> dict:
    args = {
        "IndexName": _index_name(settings),
        "Language": settings.language,
        "Position": point.as_position(),
    }
    if max_results is not None:
        args["MaxResults"] = max_results
    return args


def build_search_filter_args(settings: Settings, search: SearchFilter, max_results: Optional[int] = None) -> dict:
    """Shared by the suggestion and text searches, which take the same filters.

    The bias position and bounding box are validated on the way in but are not
    sent; the index is searched by text and country only.
    """
    args = {
        "IndexName": _index_name(settings),
        "Text": search.text,
        "Language": settings.language,
    }

    if search.countries:
        args["FilterCountries"] = list(search.countries)

    if max_results is not None:
        args["MaxResults"] = max_results

    return args


build_search_suggestions_args = build_search_filter_args
build_search_text_args = build_search_filter_args


def build_update_index_args(settings: Settings, description: Optional[str] = None) -> dict:
    args = {
        "IndexName": _index_name(settings),
        "DataSourceConfiguration": {"IntendedUse": settings.intended_use},
        "PricingPlan": settings.pricing_plan,
    }
    # no --description leaves the stored one alone
    if description is not None:
        args["Description"] = description
    return args
