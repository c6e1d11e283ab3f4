"""
Convolution kernels for the supported blur families.

Every generator returns a ``(kernel, divisor)`` pair: the weighted sum of a
neighborhood is divided by ``divisor`` after accumulation.
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from .errors import ConfigurationError, InvalidFilter
from .options import FilterKind


Kernel = Tuple[np.ndarray, int]


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise ConfigurationError(f"kernel size must be an integer, got {size!r}")
    size = int(size)
    if size < 1 or size % 2 != 1:
        raise ConfigurationError(f"kernel size must be a positive odd number, got {size}")
    return size


def gaussian_kernel(size: int, sigma: float = 1.0) -> np.ndarray:
    """
    Generate the legacy 2D Gaussian kernel.

    Weight ``(i, j)`` is ``exp(-(i² + j²) / 2σ²) / (π · 2σ²)`` where ``i`` and
    ``j`` are raw grid indices starting at the top-left corner, so the kernel
    peaks at ``(0, 0)`` rather than at its center. Weights are not normalized.

    Args:
        size: Odd kernel side length
        sigma: Standard deviation, must be positive

    Returns:
        ``size x size`` float64 kernel
    """
    size = _check_size(size)
    sigma = float(sigma)
    if not sigma > 0:
        raise ConfigurationError(f"sigma must be positive, got {sigma}")

    # A single tap is the identity, whatever the density at (0, 0).
    if size == 1:
        return np.ones((1, 1), dtype=np.float64)

    two_sigma_sq = 2.0 * sigma ** 2
    ax = np.arange(size, dtype=np.float64)
    ii, jj = np.meshgrid(ax, ax, indexing="ij")
    return np.exp(-(ii ** 2 + jj ** 2) / two_sigma_sq) / (math.pi * two_sigma_sq)


def centered_gaussian_kernel(size: int, sigma: float = 1.0) -> np.ndarray:
    """
    Generate a center-relative Gaussian kernel normalized to sum 1.
    """
    size = _check_size(size)
    sigma = float(sigma)
    if not sigma > 0:
        raise ConfigurationError(f"sigma must be positive, got {sigma}")

    radius = size // 2
    ax = np.arange(-radius, radius + 1, dtype=np.float64)
    xx, yy = np.meshgrid(ax, ax)
    kernel = np.exp(-(xx ** 2 + yy ** 2) / (2.0 * sigma ** 2))
    kernel /= np.sum(kernel)
    return kernel


def moving_average_kernel(size: int) -> Kernel:
    """Box filter: all ones, divided by the element count."""
    size = _check_size(size)
    return np.ones((size, size), dtype=np.float64), size * size


def generate(
    filter_kind: FilterKind,
    size: int,
    sigma: float = 1.0,
    centered: bool = False,
) -> Kernel:
    """
    Build the kernel and divisor for a filter family.

    Args:
        filter_kind: Kernel family
        size: Odd kernel side length
        sigma: Gaussian standard deviation (unused for moving average)
        centered: Use the center-relative Gaussian instead of the legacy one

    Returns:
        Tuple of (kernel, divisor)

    Raises:
        InvalidFilter: If ``filter_kind`` is not a ``FilterKind`` member
        ConfigurationError: On a bad size or sigma
    """
    if not isinstance(filter_kind, FilterKind):
        raise InvalidFilter(filter_kind)

    if filter_kind is FilterKind.GAUSSIAN:
        if centered:
            return centered_gaussian_kernel(size, sigma), 1
        return gaussian_kernel(size, sigma), 1
    return moving_average_kernel(size)
