from __future__ import annotations

from dataclasses import dataclass

import numpy as np


SUPPORTED_CHANNELS = (1, 2, 3, 4)


@dataclass(frozen=True)
class SourceImage:
    width: int
    height: int
    channels: int
    # HxWxC uint8, row-major and channel-interleaved
    pixels: np.ndarray

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        if self.channels not in SUPPORTED_CHANNELS:
            raise ValueError(f"unsupported channel count: {self.channels}")
        if self.pixels.dtype != np.uint8 or self.pixels.shape != (self.height, self.width, self.channels):
            raise ValueError("pixels must be HxWxC uint8")
        self.pixels.setflags(write=False)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "SourceImage":
        if arr.ndim == 2:
            arr = arr[..., None]
        if arr.ndim != 3:
            raise ValueError("Expected HxW or HxWxC array")
        h, w, c = arr.shape
        return cls(width=int(w), height=int(h), channels=int(c), pixels=np.ascontiguousarray(arr, dtype=np.uint8))


@dataclass
class TargetImage:
    width: int
    height: int
    pixels: np.ndarray

    @property
    def channels(self) -> int:
        return 4

    @property
    def alpha(self) -> np.ndarray:
        return self.pixels[..., 3]
