from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from wbr.compositor import remove_white_background
from wbr.io import load_source_image, save_png_rgba
from wbr.paths import output_path_for


logger = logging.getLogger(__name__)


def convert_file(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    out: Optional[TextIO] = None,
) -> Path:
    stream = out if out is not None else sys.stdout
    dst = Path(output_path) if output_path is not None else output_path_for(input_path)

    src = load_source_image(input_path)
    print(f"Loaded image: {src.width}x{src.height} with {src.channels} channels", file=stream)

    target = remove_white_background(src)
    save_png_rgba(dst, target)

    print(f"Successfully created: {dst}", file=stream)
    return dst
