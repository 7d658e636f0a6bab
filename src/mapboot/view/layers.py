# layers.py
from dataclasses import dataclass, field
from typing import List, Protocol
import logging

import numpy as np
import contextily as ctx
from xyzservices import TileProvider

from mapboot.errors import UnknownTileProviderError
from mapboot.model.models import Marker

logger = logging.getLogger(__name__)

INITIAL_RES = 156543.03392804097  # m/px at z=0 (3857, 256px)


class Layer(Protocol):
    name: str


@dataclass(frozen=True)
class TileLayer:
    """Base raster layer backed by an xyzservices provider or a raw XYZ url"""
    tiles: str = "OpenStreetMap.Mapnik"
    zoom: int | None = None
    max_px: int = 8192

    @property
    def name(self) -> str:
        return self.tiles

    def is_url(self) -> bool:
        return self.tiles.startswith(("http://", "https://"))

    def resolve(self):
        if self.is_url():
            return self.tiles
        prov = ctx.providers
        try:
            for p in self.tiles.split("."):
                if p: prov = getattr(prov, p)
        except (AttributeError, KeyError) as e:
            raise UnknownTileProviderError(self.tiles) from e
        if not isinstance(prov, TileProvider):
            raise UnknownTileProviderError(self.tiles)
        logger.debug("resolved tile provider %s", prov.name)
        return prov

    def url_template(self) -> str:
        provider = self.resolve()
        if isinstance(provider, str):
            return provider
        return provider.build_url()

    def attribution(self) -> str:
        provider = self.resolve()
        if isinstance(provider, str):
            return provider
        return provider.get("html_attribution", provider.get("attribution", ""))

    def clip_zoom(self, zoom: int, provider) -> int:
        zmin = getattr(provider, "min_zoom", 0)
        zmax = getattr(provider, "max_zoom", 22)
        return int(np.clip(zoom, zmin, zmax))

    def cap_zoom(self, xmin, ymin, xmax, ymax, zoom) -> int:
        m_per_px = INITIAL_RES / (2 ** zoom)
        w_px = (xmax - xmin) / m_per_px
        while w_px > self.max_px and zoom > 0:
            zoom -= 1; m_per_px *= 2; w_px /= 2
        return zoom

    def fetch(self, Xmin, Ymin, Xmax, Ymax, zoom: int):
        """Fetch the mosaic covering a EPSG:3857 bbox -> (img, extent, zoom)"""
        provider = self.resolve()
        z = self.zoom if self.zoom is not None else zoom
        if not isinstance(provider, str):
            z = self.clip_zoom(z, provider)
        z = self.cap_zoom(Xmin, Ymin, Xmax, Ymax, z)
        logger.info("fetching %s tiles at z=%d", self.name, z)
        img, extent_wm = ctx.bounds2img(Xmin, Ymin, Xmax, Ymax, source=provider, zoom=z, ll=False)
        return img, extent_wm, z


@dataclass
class MarkerLayer:
    name: str = "Markers"
    markers: List[Marker] = field(default_factory=list)

    def add_marker(self, marker: Marker) -> Marker:
        self.markers.append(marker)
        return marker

    def __len__(self):
        return len(self.markers)

    def __iter__(self):
        return iter(self.markers)
