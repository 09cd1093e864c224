from __future__ import annotations

from functools import lru_cache

from pluscode.area import CodeArea
from pluscode.core.settings import Settings, get_settings
from pluscode.decoder import decode
from pluscode.encoder import encode, encode_into
from pluscode.validation import is_full, is_short, is_valid


class Codec:
    """The codec operations bound to a ``Settings`` instance.

    The module-level functions are pure; this wrapper only supplies the
    configured default length.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings if settings is not None else get_settings()

    @property
    def default_code_length(self) -> int:
        return self.settings.default_code_length

    def encode(
        self, latitude: float, longitude: float, code_length: int | None = None
    ) -> str:
        if code_length is None:
            code_length = self.default_code_length
        return encode(latitude, longitude, code_length)

    def encode_into(
        self,
        buffer: bytearray | memoryview,
        latitude: float,
        longitude: float,
        code_length: int | None = None,
    ) -> int:
        if code_length is None:
            code_length = self.default_code_length
        return encode_into(buffer, latitude, longitude, code_length)

    def decode(self, code: str | bytes) -> CodeArea:
        return decode(code)

    def is_valid(self, code: str | bytes) -> bool:
        return is_valid(code)

    def is_full(self, code: str | bytes) -> bool:
        return is_full(code)

    def is_short(self, code: str | bytes) -> bool:
        return is_short(code)


@lru_cache
def get_codec() -> Codec:
    return Codec(get_settings())
