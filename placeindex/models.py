from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def as_position(self) -> List[float]:
        # Location Service wants X (longitude) first
        return [self.longitude, self.latitude]


@dataclass(frozen=True)
class BoundingBox:
    """Southwest corner (x1, y1) and northeast corner (x2, y2)."""
    x1: float
    y1: float
    x2: float
    y2: float

    def as_filter(self) -> List[float]:
        return [self.x1, self.y1, self.x2, self.y2]


@dataclass
class SearchFilter:
    text: str
    bias: Optional[GeoPoint] = None
    bbox: Optional[BoundingBox] = None
    countries: List[str] = field(default_factory=list)


@dataclass
class IndexDescriptor:
    name: str
    description: str = ""
    data_source: str = ""
    pricing_plan: str = ""
    intended_use: str = ""
    tags: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_response(cls, resp: dict) -> "IndexDescriptor":
        return cls(
            name=resp.get("IndexName", ""),
            description=resp.get("Description", ""),
            data_source=resp.get("DataSource", ""),
            pricing_plan=resp.get("PricingPlan", ""),
            intended_use=resp.get("DataSourceConfiguration", {}).get("IntendedUse", ""),
            tags=dict(resp.get("Tags", {})),
        )
