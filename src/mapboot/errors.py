class MapBootError(Exception):
    """Base class for map setup failures"""


class ContainerNotFoundError(MapBootError, LookupError):
    def __init__(self, name: str):
        super().__init__(f"display container not found: {name!r}")
        self.name = name


class UnknownProjectionError(MapBootError, ValueError):
    def __init__(self, crs: str):
        super().__init__(f"unknown projection: {crs!r}")
        self.crs = crs


class UnknownTileProviderError(MapBootError, LookupError):
    def __init__(self, tiles: str):
        super().__init__(f"unknown tile provider: {tiles!r}")
        self.tiles = tiles


class InvalidZoomError(MapBootError, ValueError):
    def __init__(self, zoom):
        super().__init__(f"zoom must be >= 0, got {zoom}")
        self.zoom = zoom
