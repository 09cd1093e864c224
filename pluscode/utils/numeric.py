from __future__ import annotations

import math

from pluscode.constants import (
    ENCODING_BASE,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_CODE_LENGTH,
    PAIR_CODE_LENGTH,
)
from pluscode.core.errors import InvalidCoordinate


def clamp_latitude(latitude: float) -> float:
    if math.isnan(latitude):
        raise InvalidCoordinate(value=latitude, axis="latitude")
    return min(LATITUDE_MAX, max(-LATITUDE_MAX, latitude))


def normalize_longitude(longitude: float) -> float:
    """Reduce longitude into [-180, 180)."""

    if not math.isfinite(longitude):
        raise InvalidCoordinate(value=longitude, axis="longitude")
    if -LONGITUDE_MAX <= longitude < LONGITUDE_MAX:
        return longitude
    span = 2.0 * LONGITUDE_MAX
    reduced = (longitude + LONGITUDE_MAX) % span - LONGITUDE_MAX
    # Float modulo can land exactly on the divisor for tiny negative inputs.
    if reduced >= LONGITUDE_MAX:
        reduced -= span
    return reduced


def pair_resolution(digit: int) -> float:
    """Cell size in degrees selected by pair digit ``digit`` (0-based).

    Latitude and longitude digits of the same pair share a resolution:
    20, 1, 0.05, 0.0025, 0.000125.
    """

    return ENCODING_BASE / ENCODING_BASE ** (digit // 2)


def latitude_resolution(code_length: int) -> float:
    """Height in degrees of the cell identified by a code of ``code_length`` digits."""

    if code_length <= PAIR_CODE_LENGTH:
        return pair_resolution(code_length - 1)
    code_length = min(code_length, MAX_CODE_LENGTH)
    grid_steps = code_length - PAIR_CODE_LENGTH
    return pair_resolution(PAIR_CODE_LENGTH - 1) / GRID_ROWS**grid_steps
