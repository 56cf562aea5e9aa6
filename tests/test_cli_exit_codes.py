from __future__ import annotations

from contextlib import redirect_stderr, redirect_stdout
import io
import os
from pathlib import Path
from tempfile import TemporaryDirectory
import unittest

import numpy as np
from PIL import Image

from wbr.cli import run, usage_text


def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = run(argv, prog="wbr")
    return code, out.getvalue(), err.getvalue()


class CliArgumentTests(unittest.TestCase):
    def test_no_arguments_prints_usage(self) -> None:
        code, out, err = _run([])
        self.assertEqual(code, 1)
        self.assertEqual(out, usage_text("wbr"))
        self.assertIn("Usage: wbr <input_image_path>", out)

    def test_two_arguments_prints_usage_and_writes_nothing(self) -> None:
        with TemporaryDirectory() as td:
            a = Path(td) / "a.png"
            Image.new("L", (1, 1), 0).save(a)
            code, out, _ = _run([str(a), str(a)])
            self.assertEqual(code, 1)
            self.assertIn("Usage:", out)
            self.assertFalse((Path(td) / "a_nobg.png").exists())

    def test_option_like_argument_is_treated_as_a_path(self) -> None:
        code, out, err = _run(["--threshold"])
        self.assertEqual(code, 1)
        self.assertNotIn("Usage:", out)
        self.assertIn("Error: Input file does not exist: --threshold", err)

    def test_empty_path_reports_missing_input(self) -> None:
        code, out, err = _run([""])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error: Input file does not exist: ", err)
        self.assertNotIn("Failed to load image", err)

    def test_missing_input_reports_error(self) -> None:
        with TemporaryDirectory() as td:
            missing = Path(td) / "nope.jpg"
            code, out, err = _run([str(missing)])
            self.assertEqual(code, 1)
            self.assertEqual(out, "")
            self.assertIn(f"Error: Input file does not exist: {missing}", err)
            self.assertFalse((Path(td) / "nope_nobg.png").exists())


class CliConversionTests(unittest.TestCase):
    def test_two_pixel_grayscale_end_to_end(self) -> None:
        with TemporaryDirectory() as td:
            src = Path(td) / "dots.png"
            Image.fromarray(np.array([[0, 255]], dtype=np.uint8)).save(src)
            code, out, err = _run([str(src)])
            dst = Path(td) / "dots_nobg.png"

            self.assertEqual(code, 0, err)
            self.assertEqual(err, "")
            self.assertIn(f"Processing: {src}", out)
            self.assertIn(f"Output will be saved to: {dst}", out)
            self.assertIn("Loaded image: 2x1 with 1 channels", out)
            self.assertIn(f"Successfully created: {dst}", out)

            with Image.open(dst) as img:
                self.assertEqual(img.mode, "RGBA")
                self.assertEqual(img.size, (2, 1))
                arr = np.array(img)
        self.assertEqual(arr[..., 3].tolist(), [[255, 0]])
        self.assertFalse(np.any(arr[..., :3]))

    def test_filename_starting_with_dash(self) -> None:
        with TemporaryDirectory() as td:
            cwd = os.getcwd()
            os.chdir(td)
            try:
                Image.new("L", (1, 1), 0).save("-ink.png")
                code, out, err = _run(["-ink.png"])
                made = Path("-ink_nobg.png").exists()
            finally:
                os.chdir(cwd)
        self.assertEqual(code, 0, err)
        self.assertIn("Successfully created: -ink_nobg.png", out)
        self.assertTrue(made)

    def test_jpeg_input_gets_png_output(self) -> None:
        with TemporaryDirectory() as td:
            src = Path(td) / "shape.jpg"
            Image.new("RGB", (8, 4), (255, 255, 255)).save(src, quality=95)
            code, out, _ = _run([str(src)])
            self.assertEqual(code, 0)
            self.assertIn("Loaded image: 8x4 with 3 channels", out)
            with Image.open(Path(td) / "shape_nobg.png") as img:
                self.assertEqual(img.format, "PNG")
                self.assertEqual(img.size, (8, 4))

    def test_corrupt_input_reports_reason(self) -> None:
        with TemporaryDirectory() as td:
            src = Path(td) / "broken.png"
            src.write_bytes(b"\x89PNG garbage")
            code, _, err = _run([str(src)])
            self.assertEqual(code, 1)
            self.assertIn(f"Error: Failed to load image: {src}", err)
            self.assertIn("Reason: ", err)
            self.assertFalse((Path(td) / "broken_nobg.png").exists())

    def test_unwritable_destination_reports_encode_error(self) -> None:
        with TemporaryDirectory() as td:
            src = Path(td) / "ink.png"
            Image.new("L", (2, 2), 0).save(src)
            # a directory squatting on the output name makes the PNG write fail
            (Path(td) / "ink_nobg.png").mkdir()
            code, _, err = _run([str(src)])
            self.assertEqual(code, 1)
            self.assertIn("Error: Failed to write output image:", err)


if __name__ == "__main__":
    unittest.main()
