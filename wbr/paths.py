from __future__ import annotations

from pathlib import Path
from typing import Union

from wbr.config import OUTPUT_EXTENSION, OUTPUT_SUFFIX


def output_path_for(input_path: Union[str, Path]) -> Path:
    """``foo/bar.jpg`` -> ``foo/bar_nobg.png``; ``bar.jpg`` -> ``bar_nobg.png``."""
    p = Path(input_path)
    return p.parent / f"{p.stem}{OUTPUT_SUFFIX}{OUTPUT_EXTENSION}"
