#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from pathlib import Path
import re

OUTPUT_STEM = "preview"
# pdftoppm pads the page number to the digit count of the last page
_PADDED_FIRST_PAGE_RE = re.compile(rf"^{OUTPUT_STEM}-0*1\.png$")

#============================================


def build_rasterize_command(
	path: Path | str,
	scratch_dir: Path,
	rasterizer: str = "pdftoppm",
	scale_to_x: int = 800,
) -> tuple[list[str], Path]:
	"""
	Build the first-page PNG render command.

	Args:
		path: PDF file path.
		scratch_dir: Directory that receives the image.
		rasterizer: Rasterizer executable name.
		scale_to_x: Target width; height keeps the aspect ratio.

	Returns:
		Command argv and the path where the image is expected.
	"""
	argv = [
		rasterizer,
		"-f",
		"1",
		"-l",
		"1",
		"-png",
		"-scale-to-x",
		str(scale_to_x),
		"-scale-to-y",
		"-1",
		str(path),
		str(scratch_dir / OUTPUT_STEM),
	]
	return argv, scratch_dir / f"{OUTPUT_STEM}-1.png"


#============================================


def locate_output(expected_output: Path) -> Path | None:
	"""
	Find the rendered first page, allowing zero-padded page numbers.

	Args:
		expected_output: Path from build_rasterize_command.

	Returns:
		Existing image path or None.
	"""
	if expected_output.is_file():
		return expected_output
	folder = expected_output.parent
	if not folder.is_dir():
		return None
	for candidate in sorted(folder.iterdir()):
		if _PADDED_FIRST_PAGE_RE.match(candidate.name) and candidate.is_file():
			return candidate
	return None
