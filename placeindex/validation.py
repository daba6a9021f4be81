from typing import Dict, List, Optional, Tuple

from placeindex.exceptions import ValidationError
from placeindex.models import BoundingBox, GeoPoint

BBOX_COMPONENTS = ("x1", "x2", "y1", "y2")


def validate_geo_filters(
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    x1: Optional[float] = None,
    x2: Optional[float] = None,
    y1: Optional[float] = None,
    y2: Optional[float] = None,
) -> Tuple[Optional[GeoPoint], Optional[BoundingBox]]:
    """Check that the bias position and bounding box flags come as complete sets.

    ``None`` means the flag was not given. ``0.0`` is a real coordinate
    (equator / prime meridian) and counts as set.

    Returns the bias point and the bounding box, either of which may be None.
    """
    if lat is not None and lon is None:
        raise ValidationError("latitude is set but longitude is not")
    if lat is None and lon is not None:
        raise ValidationError("longitude is set but latitude is not")

    box = {"x1": x1, "x2": x2, "y1": y1, "y2": y2}
    for name in BBOX_COMPONENTS:
        if box[name] is None:
            continue
        missing = [other for other in BBOX_COMPONENTS if other != name and box[other] is None]
        if missing:
            raise ValidationError(f"{name} is set but {missing[0]} is not")

    bias = GeoPoint(latitude=lat, longitude=lon) if lat is not None else None
    bbox = BoundingBox(x1=x1, y1=y1, x2=x2, y2=y2) if x1 is not None else None

    return bias, bbox


def parse_tags(tags: Optional[List[str]]) -> Dict[str, str]:
    """Turn ``["env=prod", ...]`` into ``{"env": "prod"}``."""
    parsed = {}
    for tag in tags or []:
        parts = tag.split("=")
        if len(parts) != 2 or not parts[0]:
            raise ValidationError(f"invalid tag: {tag}")
        parsed[parts[0]] = parts[1]
    return parsed
