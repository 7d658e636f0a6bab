# config.py
from dataclasses import dataclass, fields
from pathlib import Path
import json
import warnings

from jsonschema import validate

SCHEMA_DIR = Path(__file__).parent / "schemas"

@dataclass
class MapConfig:
    container: str = "map"
    lon: float = 10.9689
    lat: float = 52.13695
    source_crs: str = "EPSG:4326"
    projection: str = "EPSG:3857"
    zoom: int = 13
    tiles: str = "OpenStreetMap.Mapnik"
    marker_layer: str = "Markers"
    label: str | None = None
    width: int = 800
    height: int = 600

def load_json(path: str | None) -> dict:
    if not path: return {}
    p = Path(path)
    if not p.exists(): raise FileNotFoundError(path)
    with p.open("r", encoding="utf-8") as f: return json.load(f)

def from_dict(data: dict) -> MapConfig:
    """dict -> MapConfig, unknown keys are dropped with a warning"""
    known = {f.name for f in fields(MapConfig)}
    for k in sorted(data.keys() - known):
        warnings.warn(f"Unknown config key {k}")
    return MapConfig(**{k: v for k, v in data.items() if k in known})

def validate_config(data: dict, schema_dir: str | Path | None = None) -> None:
    schema_path = Path(schema_dir) if schema_dir else SCHEMA_DIR
    schema = load_json(str(schema_path / "map_config.schema.json"))
    validate(instance=data, schema=schema)

def load_config(path: str | None, validate_schema: bool = True,
                schema_dir: str | Path | None = None) -> MapConfig:
    data = load_json(path)
    if validate_schema and data:
        validate_config(data, schema_dir)
    return from_dict(data)
