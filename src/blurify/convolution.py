"""
Weighted reduction of pixel neighborhoods through a kernel.

Per channel: every tap ``value * weight`` is truncated to an integer, the
taps are summed in 64-bit, divided (integer division) by the kernel divisor
and clamped to 0xFFFF before being reduced to 8 bits.
"""
from __future__ import annotations

import numpy as np

from .image import MAX_CHANNEL_VALUE, MAX_OUTPUT_VALUE


def _weighted_sum(windows: np.ndarray, kernel: np.ndarray, divisor: int) -> np.ndarray:
    """Reduce (..., k, k, C) windows to (..., C) 16-bit channel values."""
    taps = np.floor(windows * kernel[:, :, np.newaxis])
    sums = taps.sum(axis=(-3, -2)).astype(np.int64)
    return np.minimum(sums // divisor, MAX_CHANNEL_VALUE)


def convolve_block(
    windows: np.ndarray,
    kernel: np.ndarray,
    divisor: int,
    preserve_alpha: bool = False,
) -> np.ndarray:
    """
    Convolve a block of RGBA neighborhoods.

    Args:
        windows: (..., k, k, 4) neighborhoods on the 16-bit scale
        kernel: (k, k) weights
        divisor: Positive integer applied after summation
        preserve_alpha: Blur alpha too; otherwise output alpha is opaque

    Returns:
        (..., 4) uint8 RGBA pixels
    """
    k = kernel.shape[0]
    if kernel.shape != (k, k):
        raise ValueError(f"Kernel must be square, got shape {kernel.shape}")
    if windows.shape[-3:-1] != (k, k) or windows.shape[-1] != 4:
        raise ValueError(
            f"Neighborhoods of shape {windows.shape} do not match a {k}x{k} RGBA kernel"
        )
    if divisor <= 0:
        raise ValueError(f"Divisor must be positive, got {divisor}")

    out = np.empty(windows.shape[:-3] + (4,), dtype=np.uint8)
    if preserve_alpha:
        out[...] = _weighted_sum(windows, kernel, divisor) >> 8
    else:
        out[..., :3] = _weighted_sum(windows[..., :3], kernel, divisor) >> 8
        out[..., 3] = MAX_OUTPUT_VALUE
    return out


def convolve(
    neighborhood: np.ndarray,
    kernel: np.ndarray,
    divisor: int,
    preserve_alpha: bool = False,
) -> np.ndarray:
    """
    Reduce one neighborhood to a single output pixel.

    Args:
        neighborhood: (k, k, 4) pixels around the output position
        kernel: (k, k) weights
        divisor: Positive integer applied after summation
        preserve_alpha: Blur alpha too; otherwise output alpha is 255

    Returns:
        uint8 RGBA pixel of shape (4,)
    """
    return convolve_block(np.asarray(neighborhood)[np.newaxis], kernel, divisor, preserve_alpha)[0]
