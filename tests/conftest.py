"""
Pytest fixtures for blurify tests
"""
import numpy as np
import pytest


@pytest.fixture
def white_4x4() -> np.ndarray:
    """A 4x4 opaque white RGB image."""
    return np.full((4, 4, 3), 255, dtype=np.uint8)


@pytest.fixture
def single_pixel() -> np.ndarray:
    """A 1x1 image of color (10, 20, 30)."""
    return np.array([[[10, 20, 30]]], dtype=np.uint8)


@pytest.fixture
def random_rgb() -> np.ndarray:
    """Deterministic noisy 23x37 RGB image."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(23, 37, 3), dtype=np.uint8)


@pytest.fixture
def dot_image() -> np.ndarray:
    """5x5 black image with a single white pixel at (2, 2)."""
    pixels = np.zeros((5, 5, 3), dtype=np.uint8)
    pixels[2, 2] = 255
    return pixels
