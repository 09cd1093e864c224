from __future__ import annotations

"""Fixed parameters of the Open Location Code numeral system."""

# 20 symbols; 0, 1, A, I, L and O are left out to avoid look-alikes.
CODE_ALPHABET = "23456789CFGHJMPQRVWX"
CODE_VALUES = {c: i for i, c in enumerate(CODE_ALPHABET)}

SEPARATOR = "+"
PADDING = "0"

SEPARATOR_POSITION = 8
PAIR_CODE_LENGTH = 10
MIN_CODE_LENGTH = 2
MAX_CODE_LENGTH = 15
DEFAULT_CODE_LENGTH = 10

ENCODING_BASE = 20.0
GRID_ROWS = 5
GRID_COLUMNS = 4

LATITUDE_MAX = 90.0
LONGITUDE_MAX = 180.0
