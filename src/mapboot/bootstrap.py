"""One-shot map setup: view, base tiles, reprojected marker, center."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging

from mapboot.config import MapConfig
from mapboot.model.models import GeoPoint, Marker, ProjectedPoint
from mapboot.view.layers import MarkerLayer, TileLayer
from mapboot.view.mapview import DisplayHost, MapView
from mapboot.view.projection import transform

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapContext:
    """Everything a bootstrap produced; owned by the caller"""
    map_view: MapView
    tile_layer: TileLayer
    marker_layer: MarkerLayer
    geo_point: GeoPoint
    projected_point: ProjectedPoint


class MapBootstrapper:
    def __init__(self, config: Optional[MapConfig] = None):
        self.config = config or MapConfig()

    def run(self, host: DisplayHost) -> MapContext:
        cfg = self.config

        map_view = MapView(host, cfg.container, cfg.projection)
        tile_layer = map_view.add_layer(TileLayer(cfg.tiles))

        geo = GeoPoint(cfg.lon, cfg.lat, cfg.source_crs)
        point = transform(geo, map_view.get_projection())
        zoom = cfg.zoom

        markers = map_view.add_layer(MarkerLayer(cfg.marker_layer))
        markers.add_marker(Marker(point, cfg.label))

        map_view.set_center(point, zoom)
        logger.info("map %r centered on (%.6f, %.6f) -> (%.3f, %.3f) z=%d",
                    cfg.container, geo.lon, geo.lat, point.x, point.y, zoom)

        return MapContext(map_view, tile_layer, markers, geo, point)


def bootstrap(host: DisplayHost, config: Optional[MapConfig] = None) -> MapContext:
    return MapBootstrapper(config).run(host)
