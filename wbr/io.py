from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from wbr.compositor import target_to_pil
from wbr.errors import DecodeError, EncodeError
from wbr.state import SourceImage, TargetImage


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_GRAY_MODES = {"1", "L", "F"}
_GRAY_ALPHA_MODES = {"LA", "La"}
_RGB_MODES = {"RGB", "YCbCr", "CMYK", "LAB", "HSV"}
_RGBA_MODES = {"RGBA", "RGBa", "PA"}


def _native_array(img: Image.Image) -> np.ndarray:
    # Keep the file's own channel count instead of forcing RGBA.
    mode = img.mode
    if mode == "I" or mode.startswith("I;16"):
        # 16-bit samples, whichever mode Pillow opens them as: keep the high byte
        deep = np.array(img, dtype=np.int64)
        return np.clip(deep >> 8, 0, 255).astype(np.uint8)
    if mode in _GRAY_MODES:
        return np.array(img.convert("L"), dtype=np.uint8)
    if mode in _GRAY_ALPHA_MODES:
        return np.array(img.convert("LA"), dtype=np.uint8)
    if mode == "P":
        target = "RGBA" if "transparency" in img.info else "RGB"
        return np.array(img.convert(target), dtype=np.uint8)
    if mode in _RGB_MODES:
        return np.array(img.convert("RGB"), dtype=np.uint8)
    if mode in _RGBA_MODES:
        return np.array(img.convert("RGBA"), dtype=np.uint8)
    return np.array(img.convert("RGBA"), dtype=np.uint8)


def load_source_image(path: PathLike) -> SourceImage:
    try:
        with Image.open(path) as img:
            img.load()
            logger.debug("decoded %s as %s mode=%s %dx%d", path, img.format, img.mode, img.width, img.height)
            arr = _native_array(img)
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(str(path), str(exc) or type(exc).__name__) from exc
    return SourceImage.from_array(arr)


def save_png_rgba(path: PathLike, target: TargetImage) -> None:
    img = target_to_pil(target)
    try:
        # Saving as PNG preserves alpha
        img.save(path, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError(str(path), str(exc)) from exc
    logger.debug("wrote %s (%dx%d RGBA)", path, target.width, target.height)
