from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from wbr.state import SourceImage, TargetImage


logger = logging.getLogger(__name__)

# float32 weights; summed left to right in float32 and truncated, which keeps
# pure white at 255 and matches the reference encoder byte for byte.
LUMA_R = np.float32(0.299)
LUMA_G = np.float32(0.587)
LUMA_B = np.float32(0.114)


def luminance(src: SourceImage) -> np.ndarray:
    px = src.pixels
    if src.channels >= 3:
        r = px[..., 0].astype(np.float32)
        g = px[..., 1].astype(np.float32)
        b = px[..., 2].astype(np.float32)
        luma = LUMA_R * r + LUMA_G * g + LUMA_B * b
        # astype truncates toward zero; luma is never negative
        return luma.astype(np.uint8)
    # Grayscale (with or without alpha): first channel as-is
    return px[..., 0].copy()


def remove_white_background(src: SourceImage) -> TargetImage:
    """Multiply method: black RGB with ``alpha = 255 - luminance``.

    White (255) becomes fully transparent, black (0) fully opaque. Any alpha
    already present in the source is ignored.
    """
    luma = luminance(src)
    out = np.zeros((src.height, src.width, 4), dtype=np.uint8)
    out[..., 3] = 255 - luma
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "luminance range %d..%d over %dx%d pixels",
            int(luma.min()),
            int(luma.max()),
            src.width,
            src.height,
        )
    return TargetImage(width=src.width, height=src.height, pixels=out)


def target_to_pil(target: TargetImage) -> Image.Image:
    arr = target.pixels
    if arr.dtype != np.uint8 or arr.ndim != 3 or arr.shape[2] != 4:
        raise ValueError("Expected RGBA image")
    return Image.fromarray(np.ascontiguousarray(arr))
