"""Single-pass classification of Plus Code strings.

A code with no separator at all is accepted as valid and classified as short:
it carries only significant digits and needs a reference location to resolve.
"""

from __future__ import annotations

from pluscode.constants import (
    CODE_VALUES,
    MAX_CODE_LENGTH,
    MIN_CODE_LENGTH,
    PADDING,
    SEPARATOR,
    SEPARATOR_POSITION,
)


def as_text(code: object) -> str | None:
    """Return ``code`` as ``str``; bytes-like input must be ASCII."""

    if isinstance(code, str):
        return code
    if isinstance(code, (bytes, bytearray, memoryview)):
        try:
            return bytes(code).decode("ascii")
        except UnicodeDecodeError:
            return None
    return None


def _separator_index(code: str) -> int:
    return code.find(SEPARATOR)


def _scan(code: str) -> bool:
    if len(code) < MIN_CODE_LENGTH:
        return False

    separator_seen = False
    padding = False
    significant = 0
    for i, c in enumerate(code):
        if c == SEPARATOR:
            if separator_seen:
                return False
            if i > SEPARATOR_POSITION or i % 2 == 1:
                return False
            separator_seen = True
            continue
        if c == PADDING:
            if separator_seen:
                return False
            padding = True
            continue
        # Nothing but the separator may follow padding.
        if padding:
            return False
        if c not in CODE_VALUES:
            return False
        significant += 1
        if significant > MAX_CODE_LENGTH:
            return False
    return True


def is_valid(code: str | bytes) -> bool:
    text = as_text(code)
    return text is not None and _scan(text)


def is_full(code: str | bytes) -> bool:
    text = as_text(code)
    if text is None or not _scan(text):
        return False
    return _separator_index(text) == SEPARATOR_POSITION


def is_short(code: str | bytes) -> bool:
    text = as_text(code)
    if text is None or not _scan(text):
        return False
    return _separator_index(text) < SEPARATOR_POSITION
