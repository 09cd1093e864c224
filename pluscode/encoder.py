from __future__ import annotations

import logging
import math

from pluscode.constants import (
    CODE_ALPHABET,
    DEFAULT_CODE_LENGTH,
    GRID_COLUMNS,
    GRID_ROWS,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_CODE_LENGTH,
    MIN_CODE_LENGTH,
    PADDING,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscode.core.errors import BufferTooSmall
from pluscode.utils.numeric import (
    clamp_latitude,
    latitude_resolution,
    normalize_longitude,
    pair_resolution,
)


logger = logging.getLogger(__name__)

_ALPHABET_BYTES = CODE_ALPHABET.encode("ascii")
_SEPARATOR_BYTE = ord(SEPARATOR)
_PADDING_BYTE = ord(PADDING)
_LAST_DIGIT = len(CODE_ALPHABET) - 1


def effective_code_length(code_length: int) -> int:
    """Map a requested length onto one encode can produce.

    Below 2 means "use the default"; above 15 is clamped; odd lengths inside
    the padded range are rounded up so latitude and longitude stay paired.
    """

    length = code_length
    if length < MIN_CODE_LENGTH:
        length = DEFAULT_CODE_LENGTH
    if length > MAX_CODE_LENGTH:
        length = MAX_CODE_LENGTH
    if length < SEPARATOR_POSITION and length % 2 == 1:
        length += 1
    if length != code_length:
        logger.debug("Adjusted code length %s -> %s", code_length, length)
    return length


def encoded_size(code_length: int) -> int:
    """Bytes written for ``code_length``: digits, padding up to 8, separator."""

    return max(effective_code_length(code_length), SEPARATOR_POSITION) + 1


def encode_into(
    buffer: bytearray | memoryview,
    latitude: float,
    longitude: float,
    code_length: int = DEFAULT_CODE_LENGTH,
) -> int:
    """Write the Plus Code for a coordinate into ``buffer``.

    Returns the number of ASCII bytes written. Raises ``BufferTooSmall``
    before touching the buffer when it cannot hold the whole code.
    """

    length = effective_code_length(code_length)
    required = max(length, SEPARATOR_POSITION) + 1
    if len(buffer) < required:
        raise BufferTooSmall(required=required, available=len(buffer))

    lat = clamp_latitude(latitude)
    lng = normalize_longitude(longitude)

    # Keep the north pole inside the last row of cells.
    if lat == LATITUDE_MAX:
        lat -= latitude_resolution(length)

    lat_val = lat + LATITUDE_MAX
    lng_val = lng + LONGITUDE_MAX

    idx = 0
    digit = 0

    while digit < length and digit < PAIR_CODE_LENGTH:
        res = pair_resolution(digit)

        lat_digit = min(int(math.floor(lat_val / res)), _LAST_DIGIT)
        lat_val %= res
        buffer[idx] = _ALPHABET_BYTES[lat_digit]
        idx += 1
        digit += 1
        if digit == SEPARATOR_POSITION:
            buffer[idx] = _SEPARATOR_BYTE
            idx += 1

        if digit >= length:
            break

        lng_digit = min(int(math.floor(lng_val / res)), _LAST_DIGIT)
        lng_val %= res
        buffer[idx] = _ALPHABET_BYTES[lng_digit]
        idx += 1
        digit += 1
        if digit == SEPARATOR_POSITION:
            buffer[idx] = _SEPARATOR_BYTE
            idx += 1

    while digit < SEPARATOR_POSITION:
        buffer[idx] = _PADDING_BYTE
        idx += 1
        digit += 1
        if digit == SEPARATOR_POSITION:
            buffer[idx] = _SEPARATOR_BYTE
            idx += 1

    if length > PAIR_CODE_LENGTH:
        base_res = pair_resolution(PAIR_CODE_LENGTH - 1)
        step = 0
        while digit < length:
            step += 1
            lat_step = base_res / GRID_ROWS**step
            lng_step = base_res / GRID_COLUMNS**step

            row = min(int(math.floor(lat_val / lat_step)), GRID_ROWS - 1)
            col = min(int(math.floor(lng_val / lng_step)), GRID_COLUMNS - 1)
            buffer[idx] = _ALPHABET_BYTES[row * GRID_COLUMNS + col]
            idx += 1
            digit += 1

            lat_val %= lat_step
            lng_val %= lng_step

    return idx


def encode(
    latitude: float,
    longitude: float,
    code_length: int = DEFAULT_CODE_LENGTH,
) -> str:
    """Encode a coordinate as a Plus Code string.

    >>> encode(37.7749, -122.4194)
    '849VQHFJ+X6'
    """

    buffer = bytearray(encoded_size(code_length))
    written = encode_into(buffer, latitude, longitude, code_length)
    return buffer[:written].decode("ascii")
