from .bootstrap import MapBootstrapper, MapContext, bootstrap
from .config import MapConfig
from .errors import MapBootError, ContainerNotFoundError, InvalidZoomError, UnknownProjectionError, UnknownTileProviderError

__all__ = [
    "MapBootstrapper",
    "MapContext",
    "bootstrap",
    "MapConfig",
    "MapBootError",
    "ContainerNotFoundError",
    "InvalidZoomError",
    "UnknownProjectionError",
    "UnknownTileProviderError",
]
