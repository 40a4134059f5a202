# tests/conftest.py
import sys
from pathlib import Path

import pytest

# 项目根目录：tests/ 的上一级
ROOT = Path(__file__).resolve().parents[1]
PACKAGES_DIR = ROOT / "packages"

# 把 packages 和仓库根目录（tools）放到 sys.path 顶部
sys.path.insert(0, str(PACKAGES_DIR))
sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _fresh_game_config(monkeypatch):
    from rps_core.config_loader import load_game_config

    monkeypatch.delenv("RPS_CONFIG_FILE", raising=False)
    monkeypatch.delenv("RPS_DEFAULT_ROUNDS", raising=False)
    load_game_config.cache_clear()
    yield
    load_game_config.cache_clear()
