from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CodeArea:
    """Bounding box of a decoded code.

    Bounds are never wrapped: a cell touching the antimeridian reports
    east_longitude == 180.0.
    """

    south_latitude: float
    west_longitude: float
    latitude_height: float
    longitude_width: float

    @property
    def north_latitude(self) -> float:
        return self.south_latitude + self.latitude_height

    @property
    def east_longitude(self) -> float:
        return self.west_longitude + self.longitude_width

    @property
    def latitude_center(self) -> float:
        return self.south_latitude + self.latitude_height / 2.0

    @property
    def longitude_center(self) -> float:
        return self.west_longitude + self.longitude_width / 2.0
