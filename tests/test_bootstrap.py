"""
Tests for the one-shot map setup.

Run with: python -m pytest tests/test_bootstrap.py
"""
import pytest

from mapboot import ContainerNotFoundError, InvalidZoomError, MapBootstrapper, MapConfig, bootstrap
from mapboot.model.models import GeoPoint, Marker
from mapboot.view.layers import MarkerLayer, TileLayer
from mapboot.view.mapview import DisplayHost, DisplaySurface, MapView
from mapboot.view.projection import transform


def expected_point(view):
    return transform(GeoPoint(10.9689, 52.13695, "EPSG:4326"), view.get_projection())


def test_center_and_zoom(host):
    ctx = bootstrap(host)
    view = ctx.map_view
    assert view.center == expected_point(view)
    assert view.center == ctx.projected_point
    assert view.zoom == 13
    assert view.surface.name == "map"


def test_single_marker_layer_with_single_marker(host):
    ctx = bootstrap(host)
    layers = ctx.map_view.marker_layers
    assert len(layers) == 1
    assert layers[0] is ctx.marker_layer
    assert layers[0].name == "Markers"
    assert len(layers[0]) == 1
    assert layers[0].markers[0].position == ctx.projected_point


def test_layer_order(host):
    ctx = bootstrap(host)
    kinds = [type(lyr) for lyr in ctx.map_view.layers]
    assert kinds == [TileLayer, MarkerLayer]
    assert ctx.tile_layer.tiles == "OpenStreetMap.Mapnik"


def test_independent_instances():
    host_a = DisplayHost([DisplaySurface("map")])
    host_b = DisplayHost([DisplaySurface("map")])
    a = bootstrap(host_a)
    b = bootstrap(host_b, MapConfig(lon=13.4050, lat=52.5200, zoom=10))

    assert a.map_view is not b.map_view
    assert a.marker_layer is not b.marker_layer
    assert a.map_view.zoom == 13
    assert b.map_view.zoom == 10
    assert a.map_view.center != b.map_view.center
    assert len(a.marker_layer) == 1 and len(b.marker_layer) == 1

    b.marker_layer.add_marker(Marker(b.projected_point, "extra"))
    assert len(a.marker_layer) == 1


def test_same_host_twice(host):
    a = bootstrap(host)
    b = bootstrap(host)
    assert a.map_view is not b.map_view
    assert a.map_view.center == b.map_view.center
    assert len(a.map_view.layers) == 2


def test_missing_container():
    with pytest.raises(ContainerNotFoundError) as exc:
        bootstrap(DisplayHost())
    assert exc.value.name == "map"


def test_custom_container_and_label():
    host = DisplayHost([DisplaySurface("side", 400, 300)])
    ctx = MapBootstrapper(MapConfig(container="side", label="Haldensleben")).run(host)
    assert ctx.map_view.surface.width_px == 400
    assert ctx.marker_layer.markers[0].label == "Haldensleben"


def test_marker_follows_view_projection():
    host = DisplayHost([DisplaySurface("map")])
    ctx = bootstrap(host, MapConfig(projection="EPSG:32632"))
    assert ctx.projected_point.crs == "EPSG:32632"
    assert ctx.map_view.center == expected_point(ctx.map_view)


def test_set_center_rejects_negative_zoom(host):
    view = MapView(host)
    with pytest.raises(InvalidZoomError):
        view.set_center(expected_point(view), -1)
    assert view.center is None


def test_add_layer_once(host):
    view = MapView(host)
    layer = MarkerLayer()
    view.add_layer(layer)
    view.add_layer(layer)
    assert view.layers == [layer]
