from __future__ import annotations

import logging

from pluscode.area import CodeArea
from pluscode.constants import (
    CODE_VALUES,
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING,
    PAIR_CODE_LENGTH,
    SEPARATOR,
)
from pluscode.core.errors import InvalidCode
from pluscode.utils.numeric import pair_resolution
from pluscode.validation import as_text, is_full


logger = logging.getLogger(__name__)


def decode(code: str | bytes) -> CodeArea:
    """Decode a full Plus Code into the cell it identifies.

    Each digit adds ``value * resolution`` of its place to the south/west
    edge; north/east are that edge plus the resolution of the last latitude
    and longitude digit read, with north capped at the pole. Short codes
    raise ``InvalidCode``.
    """

    text = as_text(code)
    if text is None or not is_full(text):
        logger.debug("Rejected code for decode: %r", code)
        raise InvalidCode(code)

    digits = [CODE_VALUES[c] for c in text if c not in (SEPARATOR, PADDING)]
    if not digits:
        raise InvalidCode(code, message="Plus Code has no significant digits")

    south = 0.0
    west = 0.0
    lat_res = ENCODING_BASE
    lng_res = ENCODING_BASE

    i = 0
    while i < len(digits) and i < PAIR_CODE_LENGTH:
        lat_res = pair_resolution(i)
        south += digits[i] * lat_res
        i += 1
        if i < len(digits):
            lng_res = pair_resolution(i)
            west += digits[i] * lng_res
            i += 1

    while i < len(digits):
        lat_res /= GRID_ROWS
        lng_res /= GRID_COLUMNS
        row, col = divmod(digits[i], GRID_COLUMNS)
        south += row * lat_res
        west += col * lng_res
        i += 1

    south_latitude = south - LATITUDE_MAX
    west_longitude = west - LONGITUDE_MAX
    return CodeArea(
        south_latitude=south_latitude,
        west_longitude=west_longitude,
        north_latitude=min(south_latitude + lat_res, LATITUDE_MAX),
        east_longitude=west_longitude + lng_res,
        code_length=len(digits),
    )
