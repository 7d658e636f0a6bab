# mapview.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Type, TypeVar
import logging

from mapboot.errors import ContainerNotFoundError, InvalidZoomError
from mapboot.model.models import ProjectedPoint, WEB_MERCATOR
from .layers import Layer, MarkerLayer, TileLayer
from .projection import CRSProjection, Projection

logger = logging.getLogger(__name__)

L = TypeVar("L")


# --- display containers ------------------------------------------------

@dataclass(frozen=True)
class DisplaySurface:
    name: str
    width_px: int = 800
    height_px: int = 600


class DisplayHost:
    """Named display containers a MapView can bind to"""

    def __init__(self, surfaces: Iterable[DisplaySurface] = ()):
        self._surfaces: Dict[str, DisplaySurface] = {}
        for s in surfaces:
            self.add(s)

    def add(self, surface: DisplaySurface) -> DisplaySurface:
        self._surfaces[surface.name] = surface
        return surface

    def get(self, name: str) -> DisplaySurface:
        try:
            return self._surfaces[name]
        except KeyError:
            raise ContainerNotFoundError(name) from None


# --- map view -----------------------------------------------------------

class MapView:
    """Map bound to one display surface; holds layers, center and zoom"""

    def __init__(self, host: DisplayHost, container: str = "map", projection: str = WEB_MERCATOR):
        self.surface = host.get(container)
        self._projection = CRSProjection(projection)
        self.layers: List[Layer] = []
        self._center: Optional[ProjectedPoint] = None
        self._zoom = 0
        logger.debug("map view bound to %r (%s)", container, projection)

    def get_projection(self) -> Projection:
        return self._projection

    @property
    def center(self) -> Optional[ProjectedPoint]:
        return self._center

    @property
    def zoom(self) -> int:
        return self._zoom

    def add_layer(self, layer: L) -> L:
        if any(existing is layer for existing in self.layers):
            return layer
        self.layers.append(layer)
        logger.debug("layer added: %s", layer.name)
        return layer

    def layers_of(self, kind: Type[L]) -> List[L]:
        return [lyr for lyr in self.layers if isinstance(lyr, kind)]

    @property
    def tile_layers(self) -> List[TileLayer]:
        return self.layers_of(TileLayer)

    @property
    def marker_layers(self) -> List[MarkerLayer]:
        return self.layers_of(MarkerLayer)

    def set_center(self, point: ProjectedPoint, zoom: Optional[int] = None) -> None:
        if zoom is not None:
            if int(zoom) < 0:
                raise InvalidZoomError(zoom)
            self._zoom = int(zoom)
        self._center = point
        logger.debug("center=(%.3f, %.3f) zoom=%d", point.x, point.y, self._zoom)
