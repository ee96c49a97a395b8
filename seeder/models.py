# seeder/models.py

from typing import Any, Dict, List, Literal, Tuple

from pydantic import BaseModel, field_validator


class GeoPoint(BaseModel):
    """GeoJSON Point. Coordinates are [lon, lat], not [lat, lon]."""

    type: Literal["Point"] = "Point"
    coordinates: Tuple[float, float]

    @field_validator("coordinates")
    @classmethod
    def check_range(cls, value: Tuple[float, float]) -> Tuple[float, float]:
        lon, lat = value
        if not -180.0 <= lon <= 180.0:
            raise ValueError(f"longitude out of range: {lon}")
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"latitude out of range: {lat}")
        return value

    @property
    def lon(self) -> float:
        return self.coordinates[0]

    @property
    def lat(self) -> float:
        return self.coordinates[1]


class SeedPoint(BaseModel):
    name: str
    location: GeoPoint

    @classmethod
    def at(cls, name: str, lon: float, lat: float) -> "SeedPoint":
        return cls(name=name, location=GeoPoint(coordinates=(lon, lat)))

    def to_document(self) -> Dict[str, Any]:
        """Plain dict as stored in Mongo (coordinates as a list)."""
        return {
            "name": self.name,
            "location": {
                "type": self.location.type,
                "coordinates": [self.location.lon, self.location.lat],
            },
        }


SEED_POINTS: List[SeedPoint] = [
    SeedPoint.at("Point A", -74.0060, 40.7128),
    SeedPoint.at("Point B", -118.2437, 34.0522),
]
