import pathlib
import sys

import pytest

p = str(pathlib.Path(__file__).resolve().parents[1])
sys.path.insert(0, p) if p not in sys.path else None

from naija_tax.config import get_settings  # noqa: E402

_ENV_KEYS = (
    "NAIJA_TAX_DEFAULT_CATEGORY",
    "NAIJA_TAX_LOG_LEVEL",
    "NAIJA_TAX_LOG_DIR",
    "BUILD_VERSION",
    "BUILD_SHA",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
