"""
Pixel grid container and conversions to the 16-bit working scale.

Channels are processed on a 0-65535 scale. 8-bit samples are widened by
``0x101`` so that 255 maps to 65535; results are reduced back to 8 bits
with ``>> 8``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np


MAX_CHANNEL_VALUE = 0xFFFF
MAX_OUTPUT_VALUE = 0xFF


@dataclass
class Image:
    """
    A decoded raster image.

    Attributes:
        pixels: Array of shape (H, W), (H, W, 3) or (H, W, 4), uint8 or uint16
        origin: (x, y) offset of the top-left pixel
    """

    pixels: np.ndarray
    origin: Tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        self.pixels = np.asarray(self.pixels)
        if self.pixels.ndim not in (2, 3):
            raise ValueError(f"Image expects a 2D or 3D pixel array, got {self.pixels.ndim}D")
        if self.pixels.ndim == 3 and self.pixels.shape[2] not in (3, 4):
            raise ValueError(f"Image expects 3 or 4 channels, got {self.pixels.shape[2]}")
        if self.pixels.dtype not in (np.uint8, np.uint16):
            raise ValueError(f"Unsupported pixel dtype: {self.pixels.dtype}")
        self.origin = (int(self.origin[0]), int(self.origin[1]))

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def channels(self) -> int:
        return 1 if self.pixels.ndim == 2 else int(self.pixels.shape[2])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height


ImageLike = Union[Image, np.ndarray]


def as_image(image: ImageLike) -> Image:
    """Wrap a bare pixel array; pass ``Image`` instances through."""
    if isinstance(image, Image):
        return image
    return Image(np.asarray(image))


def to_working(image: Image, premultiply: bool = True) -> np.ndarray:
    """
    Convert an image to the RGBA working buffer.

    The buffer holds one 8-bit sample per channel expressed on the 16-bit
    scale (``v8 * 0x101``), mirroring an 8-bit RGBA canvas read back through
    a 16-bit color model. Grayscale is expanded to RGB; missing alpha is
    opaque.

    Args:
        image: Source image
        premultiply: Scale color channels by alpha before quantizing

    Returns:
        uint32 array of shape (H, W, 4)
    """
    pixels = image.pixels
    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]

    wide = pixels.astype(np.uint32)
    if pixels.dtype == np.uint8:
        wide *= 0x101

    channels = wide.shape[2]
    if channels == 1:
        rgb = np.repeat(wide, 3, axis=2)
    else:
        rgb = wide[:, :, :3]

    if channels == 4:
        alpha = wide[:, :, 3:]
    else:
        alpha = np.full(wide.shape[:2] + (1,), MAX_CHANNEL_VALUE, dtype=np.uint32)

    if premultiply:
        rgb = rgb * alpha // MAX_CHANNEL_VALUE

    rgba = np.concatenate([rgb, alpha], axis=2)
    return (rgba >> 8) * 0x101
