from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def isolated_user_config(monkeypatch, tmp_path):
    """Never read or write the developer's real ~/.ratatodo_config.yaml."""
    cfg = tmp_path / "ratatodo_config.yaml"
    monkeypatch.setenv("RATATODO_CONFIG", str(cfg))
    monkeypatch.delenv("RATATODO_LANG", raising=False)
    monkeypatch.delenv("RATATODO_TUI_TTIMEOUTLEN", raising=False)
    return cfg
