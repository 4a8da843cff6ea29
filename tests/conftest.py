import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from greeting_service.config import reset_settings_cache  # noqa: E402

SETTINGS_ENV_VARS = (
    "GREETING_APP_NAME",
    "GREETING_HOST",
    "GREETING_PORT",
    "GREETING_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Run every test against default settings with no ``.env`` file in reach."""

    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield
    reset_settings_cache()
