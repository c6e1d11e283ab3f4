"""
Spatial blur of in-memory raster images with Gaussian and moving-average kernels.
"""
from __future__ import annotations

from .convolution import convolve, convolve_block
from .errors import BlurError, ConfigurationError, InvalidFilter
from .image import Image, to_working
from .kernel import centered_gaussian_kernel, gaussian_kernel, generate, moving_average_kernel
from .options import BlurOptions, FilterKind, PaddingPolicy
from .padding import PaddedImage, pad
from .pipeline import blur
from .utils import load_options, load_settings

__version__ = "0.1.0"

__all__ = [
    "BlurError",
    "BlurOptions",
    "ConfigurationError",
    "FilterKind",
    "Image",
    "InvalidFilter",
    "PaddedImage",
    "PaddingPolicy",
    "blur",
    "centered_gaussian_kernel",
    "convolve",
    "convolve_block",
    "gaussian_kernel",
    "generate",
    "load_options",
    "load_settings",
    "moving_average_kernel",
    "pad",
    "to_working",
]
