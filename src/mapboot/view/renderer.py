# renderer.py
from typing import Tuple
import logging

import matplotlib.pyplot as plt

from mapboot.errors import MapBootError
from mapboot.model.models import ProjectedPoint, WEB_MERCATOR
from .layers import INITIAL_RES
from .mapview import MapView
from .projection import get_transformer

logger = logging.getLogger(__name__)


def viewport_extent(center: ProjectedPoint, zoom: int,
                    width_px: int, height_px: int) -> Tuple[float, float, float, float]:
    """Visible (xmin, ymin, xmax, ymax) in EPSG:3857 metres around a 3857 center"""
    m_per_px = INITIAL_RES / (2 ** zoom)
    half_w = 0.5 * width_px * m_per_px
    half_h = 0.5 * height_px * m_per_px
    return (center.x - half_w, center.y - half_h, center.x + half_w, center.y + half_h)


def to_web_mercator(point: ProjectedPoint) -> ProjectedPoint:
    """ProjectedPoint in any CRS -> EPSG:3857, the tile frame"""
    if point.crs == WEB_MERCATOR:
        return point
    x, y = get_transformer(point.crs, WEB_MERCATOR).transform(point.x, point.y)
    return ProjectedPoint(float(x), float(y), WEB_MERCATOR)


class PlotRenderer:
    def __init__(self, map_view: MapView, dpi: int = 100):
        self.view = map_view
        self.dpi = dpi
        self._fig = None

    def extent(self):
        if self.view.center is None:
            raise MapBootError("map center is not set")
        s = self.view.surface
        center = to_web_mercator(self.view.center)
        return viewport_extent(center, self.view.zoom, s.width_px, s.height_px)

    def draw(self):
        xmin, ymin, xmax, ymax = self.extent()
        s = self.view.surface
        fig, ax = plt.subplots(figsize=(s.width_px / self.dpi, s.height_px / self.dpi), dpi=self.dpi)

        # base tiles
        for layer in self.view.tile_layers:
            img, ext, z = layer.fetch(xmin, ymin, xmax, ymax, self.view.zoom)
            ax.imshow(img, extent=ext, origin="upper", interpolation="bilinear", zorder=0)
            logger.debug("drew %s at z=%d extent=%s", layer.name, z, ext)

        # markers
        for layer in self.view.marker_layers:
            for m in layer:
                p = to_web_mercator(m.position)
                ax.plot(p.x, p.y, marker='o', markersize=8,
                        mec='black', mfc='red', zorder=6)
                if m.label:
                    ax.annotate(m.label, (p.x, p.y),
                                xytext=(5, 8), textcoords='offset points',
                                fontsize=12,
                                bbox=dict(boxstyle="round,pad=0.25",
                                          fc="white", ec="gray", alpha=0.85),
                                zorder=7)

        ax.set_xlim(xmin, xmax)
        ax.set_ylim(ymin, ymax)
        ax.set_aspect("equal", adjustable="box")
        ax.set_axis_off()
        fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
        return fig

    def figure(self):
        """Draw once; later calls reuse the figure"""
        if self._fig is None:
            self._fig = self.draw()
        return self._fig

    def save(self, path: str):
        self.figure().savefig(path, dpi=self.dpi)

    def show(self):
        self.figure()
        plt.show()

    def close(self):
        if self._fig is not None:
            plt.close(self._fig)
            self._fig = None
