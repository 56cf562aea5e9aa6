from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence

from wbr.config import OUTPUT_SUFFIX, PROGRAM_NAME, Settings
from wbr.convert import convert_file
from wbr.errors import ArgumentError, DecodeError, EncodeError, InputNotFoundError, WbrError
from wbr.log import configure_logging
from wbr.paths import output_path_for


logger = logging.getLogger(__name__)


def usage_text(prog: str) -> str:
    lines = [
        "White Background Remover (wbr)",
        "Removes white background from black silhouette images.",
        "",
        f"Usage: {prog} <input_image_path>",
        "",
        "Arguments:",
        "  input_image_path  Path to the input image (JPEG, PNG, BMP, etc.)",
        "",
        "Output:",
        f"  Creates a new PNG file with '{OUTPUT_SUFFIX}' suffix in the same directory",
        f"  Example: input.jpg -> input{OUTPUT_SUFFIX}.png",
    ]
    return "\n".join(lines) + "\n"


class _ArgumentParser(argparse.ArgumentParser):
    # argparse prints to stderr and exits 2; usage problems here exit 1 via ArgumentError.
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def build_parser(prog: str = PROGRAM_NAME) -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=prog, add_help=False, usage="%(prog)s <input_image_path>")
    parser.add_argument("input_image_path")
    return parser


def _check_input(path: str) -> None:
    if not path or not Path(path).exists():
        raise InputNotFoundError(path)


def run(argv: Sequence[str], prog: str = PROGRAM_NAME) -> int:
    try:
        # "--" keeps a path such as "-ink.png" positional
        args = build_parser(prog).parse_args(["--", *argv])
    except ArgumentError as exc:
        logger.debug("bad arguments: %s", exc)
        sys.stdout.write(usage_text(prog))
        return 1

    input_path: str = args.input_image_path
    try:
        _check_input(input_path)
        output_path = output_path_for(input_path)
        print(f"Processing: {input_path}")
        print(f"Output will be saved to: {output_path}")
        convert_file(input_path, output_path)
    except InputNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except DecodeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(f"Reason: {exc.reason}", file=sys.stderr)
        return 1
    except EncodeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        logger.debug("encoder reported: %s", exc.reason)
        return 1
    except WbrError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[List[str]] = None, prog: str = PROGRAM_NAME) -> int:
    configure_logging(Settings.from_env().log_level_value)
    if argv is None:
        argv = sys.argv[1:]
    return run(argv, prog=prog)
