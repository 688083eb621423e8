from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))


@pytest.fixture(autouse=True)
def _clear_segmenter_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell overrides out of settings-sensitive tests."""
    import os

    for key in [k for k in os.environ if k.startswith("SUBTITLE_SEGMENTER__")]:
        monkeypatch.delenv(key, raising=False)
