"""Geographic value types shared by the plan and route engines."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GeoPoint(BaseModel):
    """Immutable WGS84 coordinate in degrees.

    No datum correction is applied; precision is adequate at city scale.

    Attributes:
        lat: Latitude in degrees (-90 to 90)
        lng: Longitude in degrees (-180 to 180)
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class BoundingBox(BaseModel):
    """Axis-aligned latitude/longitude box used for GPS sanity checks."""

    model_config = ConfigDict(frozen=True)

    min_lat: float = Field(ge=-90.0, le=90.0)
    max_lat: float = Field(ge=-90.0, le=90.0)
    min_lng: float = Field(ge=-180.0, le=180.0)
    max_lng: float = Field(ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def validate_ordering(self) -> "BoundingBox":
        if self.min_lat > self.max_lat:
            raise ValueError(f"min_lat ({self.min_lat}) must not exceed max_lat ({self.max_lat})")
        if self.min_lng > self.max_lng:
            raise ValueError(f"min_lng ({self.min_lng}) must not exceed max_lng ({self.max_lng})")
        return self
