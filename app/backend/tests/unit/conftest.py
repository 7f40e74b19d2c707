from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[4]))

import pytest

from app.backend.src.core.config import get_settings
from app.backend.src.core.security import get_authenticator
from app.backend.src.services.sessions import get_session_registry


@pytest.fixture(autouse=True)
def reset_cached_state():
    get_settings.cache_clear()
    get_authenticator.cache_clear()
    get_session_registry.cache_clear()
    yield
    get_settings.cache_clear()
    get_authenticator.cache_clear()
    get_session_registry.cache_clear()
