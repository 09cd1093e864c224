from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import sys

import pytest


# Ensure `import pluscode` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """Monkeypatch for PLUSCODE_* variables with the settings caches cleared."""

    from pluscode.codec import get_codec
    from pluscode.core.settings import get_settings

    monkeypatch.delenv("PLUSCODE_DEFAULT_CODE_LENGTH", raising=False)
    get_settings.cache_clear()
    get_codec.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
    get_codec.cache_clear()


@pytest.fixture()
def reference_cities() -> list[tuple[str, float, float, str]]:
    # (name, latitude, longitude, 10-digit code)
    return [
        ("Origin", 0.0, 0.0, "6FG22222+22"),
        ("San Francisco", 37.7749, -122.4194, "849VQHFJ+X6"),
        ("London", 51.5074, -0.1278, "9C3XGV4C+XV"),
        ("Tokyo", 35.6762, 139.6503, "8Q7XMMG2+F4"),
        ("Sydney", -33.8688, 151.2093, "4RRH46J5+FP"),
        ("Moscow", 55.7558, 37.6173, "9G7VQJ48+8W"),
        ("Mexico City", 19.4326, -99.1332, "76F2CVM8+2P"),
        ("Rio de Janeiro", -22.9068, -43.1729, "589R3RVG+7R"),
        ("Paris", 48.8566, 2.3522, "8FW4V942+JV"),
        ("New York", 40.7128, -74.0060, "87G7PX7V+4H"),
        ("Singapore", 1.3521, 103.8198, "6PH59R29+RW"),
        ("Dubai", 25.2048, 55.2708, "7HQQ673C+W8"),
    ]
