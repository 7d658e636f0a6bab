# projection.py
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple, Protocol
import logging

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError

from mapboot.errors import UnknownProjectionError
from mapboot.model.models import GeoPoint, ProjectedPoint, WGS84, WEB_MERCATOR

logger = logging.getLogger(__name__)


class Projection(Protocol):
    code: str
    def lonlat_to_xy(self, lon: float, lat: float) -> Tuple[float, float]: ...
    def xy_to_lonlat(self, x: float, y: float) -> Tuple[float, float]: ...


def check_crs(code: str) -> CRS:
    try:
        return CRS.from_user_input(code)
    except CRSError as e:
        raise UnknownProjectionError(code) from e


@lru_cache(maxsize=32)
def get_transformer(src: str, dst: str) -> Transformer:
    """Cached (src -> dst) transformer, always lon/lat (x/y) axis order."""
    check_crs(src)
    check_crs(dst)
    logger.debug("building transformer %s -> %s", src, dst)
    return Transformer.from_crs(src, dst, always_xy=True)


@dataclass(frozen=True)
class CRSProjection:
    """Map projection with its geographic counterpart (default EPSG:4326 <-> EPSG:3857)"""
    code: str = WEB_MERCATOR
    geographic: str = WGS84

    def __post_init__(self):
        object.__setattr__(self, "_to_proj", get_transformer(self.geographic, self.code))
        object.__setattr__(self, "_to_geo", get_transformer(self.code, self.geographic))

    def lonlat_to_xy(self, lon, lat):
        return self._to_proj.transform(lon, lat)

    def xy_to_lonlat(self, x, y):
        return self._to_geo.transform(x, y)


def transform(point: GeoPoint, target: Projection) -> ProjectedPoint:
    """GeoPoint (any CRS) -> ProjectedPoint in the target projection"""
    x, y = get_transformer(point.crs, target.code).transform(point.lon, point.lat)
    return ProjectedPoint(float(x), float(y), target.code)


def inverse(point: ProjectedPoint, crs: str = WGS84) -> GeoPoint:
    lon, lat = get_transformer(point.crs, crs).transform(point.x, point.y)
    return GeoPoint(float(lon), float(lat), crs)
