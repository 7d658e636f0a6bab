from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

WGS84 = "EPSG:4326"
WEB_MERCATOR = "EPSG:3857"


# --- points -----------------------------------------------------------

@dataclass(frozen=True)
class GeoPoint:
    """Geographic coordinate (degrees) tagged with its CRS"""
    lon: float
    lat: float
    crs: str = WGS84

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lon, self.lat)


@dataclass(frozen=True)
class ProjectedPoint:
    """Coordinate in a map projection (metres for EPSG:3857)"""
    x: float
    y: float
    crs: str = WEB_MERCATOR

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


# --- overlay ----------------------------------------------------------

@dataclass(frozen=True)
class Marker:
    position: ProjectedPoint
    label: Optional[str] = None


__all__ = [
    "WGS84",
    "WEB_MERCATOR",
    "GeoPoint",
    "ProjectedPoint",
    "Marker",
]
