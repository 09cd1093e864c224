"""Open Location Code (Plus Codes) encoding and decoding."""

from pluscode.area import CodeArea
from pluscode.codec import Codec, get_codec
from pluscode.constants import (
    CODE_ALPHABET,
    DEFAULT_CODE_LENGTH,
    MAX_CODE_LENGTH,
    PADDING,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscode.core.errors import (
    BufferTooSmall,
    CodecError,
    InvalidCode,
    InvalidCoordinate,
    InvalidLength,
)
from pluscode.decoder import decode
from pluscode.encoder import encode, encode_into, encoded_size
from pluscode.validation import is_full, is_short, is_valid


__all__ = [
    "BufferTooSmall",
    "CODE_ALPHABET",
    "Codec",
    "CodeArea",
    "CodecError",
    "DEFAULT_CODE_LENGTH",
    "InvalidCode",
    "InvalidCoordinate",
    "InvalidLength",
    "MAX_CODE_LENGTH",
    "PADDING",
    "SEPARATOR",
    "SEPARATOR_POSITION",
    "decode",
    "encode",
    "encode_into",
    "encoded_size",
    "get_codec",
    "is_full",
    "is_short",
    "is_valid",
]
