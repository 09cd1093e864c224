from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CodeArea:
    """Bounding box of a decoded Plus Code, in degrees.

    ``code_length`` counts significant digits only (no separator, no padding).
    """

    south_latitude: float
    west_longitude: float
    north_latitude: float
    east_longitude: float
    code_length: int

    def center_latitude(self) -> float:
        return (self.south_latitude + self.north_latitude) / 2.0

    def center_longitude(self) -> float:
        return (self.west_longitude + self.east_longitude) / 2.0

    def latitude_span(self) -> float:
        return self.north_latitude - self.south_latitude

    def longitude_span(self) -> float:
        return self.east_longitude - self.west_longitude

    def contains(self, latitude: float, longitude: float) -> bool:
        # South/west edges belong to the cell, north/east edges to the neighbour.
        return (
            self.south_latitude <= latitude < self.north_latitude
            and self.west_longitude <= longitude < self.east_longitude
        )
