from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(slots=True)
class CodecError(Exception):
    """Base error of the codec; ``code`` is a stable machine-readable name."""

    code: str
    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidCode(CodecError):
    def __init__(self, value: object, message: str = "Not a full Plus Code") -> None:
        super().__init__(
            code="INVALID_CODE",
            message=f"{message}: {value!r}",
            details={"value": value if isinstance(value, str) else repr(value)},
        )


class InvalidLength(CodecError):
    # Not raised by encode: out-of-range lengths are clamped instead.
    def __init__(self, code_length: int) -> None:
        super().__init__(
            code="INVALID_LENGTH",
            message=f"Invalid code length: {code_length}",
            details={"code_length": code_length},
        )


class BufferTooSmall(CodecError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            code="BUFFER_TOO_SMALL",
            message=f"Output buffer holds {available} bytes, {required} required",
            details={"required": required, "available": available},
        )


class InvalidCoordinate(CodecError):
    def __init__(self, value: float, axis: str) -> None:
        super().__init__(
            code="INVALID_COORDINATE",
            message=f"Cannot encode {axis} {value!r}",
            details={"axis": axis, "value": value},
        )
