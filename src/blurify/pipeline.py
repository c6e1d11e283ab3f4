"""
Blur pipeline: validate options, pad, convolve every pixel, emit the result.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from .convolution import convolve_block
from .image import Image, ImageLike, as_image, to_working
from .kernel import generate
from .options import BlurOptions
from .padding import pad


logger = logging.getLogger(__name__)

# Upper bound on float64 taps materialized per row block.
_BLOCK_TAPS = 1 << 22


def _row_blocks(height: int, width: int, kernel_size: int, workers: int) -> List[Tuple[int, int]]:
    """Split output rows into contiguous [start, end) blocks."""
    taps_per_row = max(1, width * kernel_size * kernel_size * 4)
    rows = max(1, _BLOCK_TAPS // taps_per_row)
    if workers > 1:
        # At least one block per worker when the image is tall enough.
        rows = min(rows, max(1, -(-height // workers)))
    return [(start, min(start + rows, height)) for start in range(0, height, rows)]


def blur(image: ImageLike, options: Optional[BlurOptions] = None) -> Image:
    """
    Blur an image with a Gaussian or moving-average kernel.

    Args:
        image: Source image (``Image`` or bare pixel array)
        options: Blur options; defaults are applied to zero-valued fields

    Returns:
        New 8-bit RGBA ``Image`` with the same size and origin as the source

    Raises:
        ConfigurationError: If the options are inconsistent
        InvalidFilter: If the filter kind is unsupported
        ValueError: If the pixel array has an unsupported shape or dtype
    """
    opts = (options or BlurOptions()).with_defaults().validate()
    src = as_image(image)

    kernel, divisor = generate(opts.filter, opts.kernel_size, opts.sigma, centered=opts.centered_gaussian)

    logger.debug(
        "Blurring %dx%d image: filter=%s size=%d sigma=%s padding=%s workers=%d",
        src.width, src.height, opts.filter.value, opts.kernel_size, opts.sigma,
        opts.padding.value, opts.workers,
    )

    output = np.empty((src.height, src.width, 4), dtype=np.uint8)
    if output.size == 0:
        return Image(output, origin=src.origin)

    working = to_working(src, premultiply=not opts.preserve_alpha)
    padded = pad(working, opts.padding_size, opts.padding)
    windows = padded.windows()

    def process(block: Tuple[int, int]) -> None:
        start, end = block
        output[start:end] = convolve_block(windows[start:end], kernel, divisor, opts.preserve_alpha)

    blocks = _row_blocks(src.height, src.width, opts.kernel_size, opts.workers)
    if opts.workers > 1 and len(blocks) > 1:
        with ThreadPoolExecutor(max_workers=opts.workers) as executor:
            # list() re-raises the first worker exception
            list(executor.map(process, blocks))
    else:
        for block in blocks:
            process(block)

    logger.debug("Processed %d row blocks", len(blocks))
    return Image(output, origin=src.origin)
