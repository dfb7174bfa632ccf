# Shared fixtures: tiny synthetic images written into tmp_path.

from pathlib import Path

import numpy as np
import pytest
from PIL import Image

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _save(path: Path, arr: np.ndarray, fmt: str) -> Path:
    img = Image.fromarray(arr)
    if fmt == "JPEG":
        img = img.convert("RGB")
    img.save(path, format=fmt)
    return path


@pytest.fixture
def solid_image(tmp_path):
    """Factory: solid-color image of (width, height) saved in the given format."""
    def _make(name, size, color, fmt="PNG"):
        width, height = size
        arr = np.empty((height, width, 4), dtype=np.uint8)
        arr[...] = color
        return _save(tmp_path / name, arr, fmt)
    return _make


@pytest.fixture
def random_image(tmp_path):
    """Factory: random RGBA PNG, deterministic per seed."""
    def _make(name, size, seed=0):
        width, height = size
        rng = np.random.default_rng(seed)
        arr = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
        return _save(tmp_path / name, arr, "PNG")
    return _make


@pytest.fixture
def red():
    return RED


@pytest.fixture
def blue():
    return BLUE
