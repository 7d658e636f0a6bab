from .models import GeoPoint, ProjectedPoint, Marker

__all__ = ["GeoPoint", "ProjectedPoint", "Marker"]
