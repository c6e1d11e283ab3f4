"""
Border padding for the convolution working buffer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .options import PaddingPolicy


_NUMPY_MODES = {
    PaddingPolicy.EDGE_CLAMP: "edge",
    PaddingPolicy.MIRROR: "reflect",
}


@dataclass
class PaddedImage:
    """
    Working buffer with a border of ``padding`` pixels.

    Source pixel ``(x, y)`` lives at buffer coordinate ``(x + padding,
    y + padding)``. Under ``ZERO_TRAILING`` the buffer only grows by
    ``padding`` on the bottom/right; reads past its edge are zero.

    Attributes:
        pixels: (H', W', C) buffer
        padding: Half-width of the kernel the buffer was built for
        policy: Policy used to fill the border
        source_size: (width, height) of the unpadded source
    """

    pixels: np.ndarray
    padding: int
    policy: PaddingPolicy
    source_size: Tuple[int, int]

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def _sampling_grid(self) -> np.ndarray:
        """Buffer extended so every window lies inside it."""
        p = self.padding
        if self.policy is not PaddingPolicy.ZERO_TRAILING or p == 0:
            return self.pixels
        return np.pad(self.pixels, ((0, p), (0, p), (0, 0)), mode="constant", constant_values=0)

    def neighborhood(self, x: int, y: int) -> np.ndarray:
        """
        Window of side ``2 * padding + 1`` centered at buffer coordinate (x, y).

        Returns:
            (k, k, C) array indexed [row, column, channel]
        """
        p = self.padding
        grid = self._sampling_grid()
        if not (p <= x < grid.shape[1] - p and p <= y < grid.shape[0] - p):
            raise ValueError(f"Neighborhood at ({x}, {y}) falls outside the padded image")
        return grid[y - p : y + p + 1, x - p : x + p + 1]

    def windows(self) -> np.ndarray:
        """
        Read-only view of every output pixel's neighborhood.

        Returns:
            (H, W, k, k, C) strided view over the padded buffer
        """
        size = 2 * self.padding + 1
        view = sliding_window_view(self._sampling_grid(), (size, size), axis=(0, 1))
        # sliding_window_view puts the window axes last: (H, W, C, k, k)
        return np.moveaxis(view, 2, -1)


def pad(src: np.ndarray, p: int, policy: PaddingPolicy = PaddingPolicy.ZERO_TRAILING) -> PaddedImage:
    """
    Extend a working buffer so every output pixel has a full neighborhood.

    Args:
        src: (H, W, C) pixel buffer
        p: Padding width (kernel size // 2)
        policy: How to fill the new border cells

    Returns:
        PaddedImage wrapping a new buffer
    """
    if src.ndim != 3:
        raise ValueError("pad expects an (H, W, C) buffer")
    if p < 0:
        raise ValueError(f"Padding must be non-negative, got {p}")

    height, width = src.shape[:2]
    policy = PaddingPolicy.parse(policy)

    if policy is PaddingPolicy.ZERO_TRAILING:
        # Shift the image by p; the leading margin and anything past the
        # trailing edge stay zero.
        padded = np.zeros((height + p, width + p, src.shape[2]), dtype=src.dtype)
        padded[p:, p:] = src
    else:
        padded = np.pad(src, ((p, p), (p, p), (0, 0)), mode=_NUMPY_MODES[policy])

    return PaddedImage(pixels=padded, padding=p, policy=policy, source_size=(width, height))
