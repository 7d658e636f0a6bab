# export.py
from pathlib import Path
import logging

import folium

from mapboot.bootstrap import MapContext
from mapboot.errors import MapBootError
from .projection import inverse

logger = logging.getLogger(__name__)


def to_folium(context: MapContext) -> folium.Map:
    view = context.map_view
    if view.center is None:
        raise MapBootError("map center is not set")

    # folium wants (lat, lon) in EPSG:4326
    c = inverse(view.center)
    fmap = folium.Map(location=[c.lat, c.lon], zoom_start=view.zoom, tiles=None)
    for layer in view.tile_layers:
        folium.TileLayer(tiles=layer.url_template(), attr=layer.attribution(), name=layer.name).add_to(fmap)

    for layer in view.marker_layers:
        for m in layer:
            g = inverse(m.position)
            folium.Marker([g.lat, g.lon], tooltip=m.label).add_to(fmap)
    return fmap


def save_html(context: MapContext, path: str | Path) -> Path:
    p = Path(path)
    to_folium(context).save(str(p))
    logger.info("saved %s", p)
    return p
