from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


PROGRAM_NAME = "wbr"
OUTPUT_SUFFIX = "_nobg"
OUTPUT_EXTENSION = ".png"

LOG_LEVEL_ENV = "WBR_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        raw = str(env.get(LOG_LEVEL_ENV, "")).strip().upper()
        # getLevelName maps known names to ints, anything else to a "Level x" string
        if not raw or not isinstance(logging.getLevelName(raw), int):
            raw = DEFAULT_LOG_LEVEL
        return cls(log_level=raw)
