from __future__ import annotations

from pathlib import Path
import sys
from typing import Iterator

import pytest


# Ensure `import pluscodes` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # Settings are cached process-wide; isolate each test from the host env.
    monkeypatch.delenv("PLUSCODES_DEFAULT_CODE_LENGTH", raising=False)
    monkeypatch.delenv("PLUSCODES_NEAR_INT_EPSILON", raising=False)

    from pluscodes.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
