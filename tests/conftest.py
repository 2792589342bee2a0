import sys
from pathlib import Path

import numpy as np
import pytest


def pytest_sessionstart(session):
    """Ensure `src` is on sys.path for imports like `from sharp_score import ...`."""
    root = Path(__file__).resolve().parents[1]
    src = root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


@pytest.fixture
def uniform_gray():
    return np.full((64, 64), 127, dtype=np.uint8)


@pytest.fixture
def checkerboard():
    """0/255 の1画素チェッカーボード（64x64）"""
    y, x = np.indices((64, 64))
    return (((x + y) % 2) * 255).astype(np.uint8)


@pytest.fixture
def linear_ramp():
    """横方向の線形グラデーション（高周波成分なし）"""
    row = (np.arange(32) * 8).astype(np.uint8)
    return np.tile(row, (32, 1))
