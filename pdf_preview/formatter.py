#!/usr/bin/env python3
"""
Text blocks shown in the preview pane.
"""

from __future__ import annotations

# Standard Library
from pathlib import Path
import os
import re

# local repo modules
from .dependencies import DependencyStatus

UNKNOWN_FAILURE = "PDF conversion failed for unknown reason"
_EXTENSION_RE = re.compile(r"\.([^.]+)$")

#============================================


def file_type(display_name: str) -> str:
	"""
	Extension after the last dot of the base name.

	Args:
		display_name: Entry name as shown in the picker.

	Returns:
		Extension without the dot, or "unknown".
	"""
	match = _EXTENSION_RE.search(os.path.basename(display_name))
	if not match:
		return "unknown"
	return match.group(1)


#============================================
def _status(available: bool) -> str:
	return "✅ Available" if available else "❌ Missing"


#============================================


def build_success_lines(
	display_name: str,
	pdf_path: Path | str,
	image_path: Path | str,
	info_lines: list[str],
	image_size: tuple[int, int] | None = None,
) -> list[str]:
	"""
	Block shown after the first page rendered.

	Args:
		display_name: Entry name as shown in the picker.
		pdf_path: Full PDF path.
		image_path: Rendered PNG path.
		info_lines: Lines from get_pdf_info, appended verbatim.
		image_size: Optional (width, height) of the PNG.

	Returns:
		Display lines.
	"""
	lines = [
		"📄 PDF Preview Generated",
		f"File: {display_name}",
		f"Path: {pdf_path}",
		"",
		f"Preview image: {image_path}",
	]
	if image_size:
		lines.append(f"Image size: {image_size[0]}x{image_size[1]} px")
	lines.extend(
		[
			"",
			"💡 For better preview experience:",
			"• Install 'image.nvim' for inline images",
			"• Or use 'hologram.nvim' for terminal images",
		]
	)
	lines.extend(info_lines)
	return lines


#============================================


def build_failure_lines(
	display_name: str,
	deps: DependencyStatus,
	install_hint: str,
) -> list[str]:
	"""
	Block shown when a preview cannot be produced.

	Args:
		display_name: Entry name as shown in the picker.
		deps: Dependency probe result.
		install_hint: Install instruction for missing tools.

	Returns:
		Display lines.
	"""
	lines = [
		"❌ Failed to preview PDF",
		f"File: {display_name}",
		"",
	]
	if not deps.all_available:
		lines.extend(
			[
				"Missing dependencies:",
				f"• {deps.rasterizer_name}: {_status(deps.rasterizer)}",
				f"• {deps.info_tool_name}: {_status(deps.info_tool)}",
				"",
				f"Install with: {install_hint}",
			]
		)
	else:
		lines.append(UNKNOWN_FAILURE)
	return lines


#============================================


def build_non_pdf_lines(display_name: str) -> list[str]:
	return [
		"📄 Not a PDF file",
		f"File: {display_name}",
		f"Type: {file_type(display_name)}",
	]


#============================================


def build_readiness_lines(deps: DependencyStatus, install_hint: str) -> list[str]:
	"""
	System check report for the command line.

	Args:
		deps: Dependency probe result.
		install_hint: Install instruction for missing tools.

	Returns:
		Display lines.
	"""
	width = max(len(deps.rasterizer_name), len(deps.info_tool_name)) + 1
	lines = [
		"📋 PDF Preview System Check:",
		f"{(deps.rasterizer_name + ':').ljust(width)} {'✅' if deps.rasterizer else '❌'}",
		f"{(deps.info_tool_name + ':').ljust(width)} {'✅' if deps.info_tool else '❌'}",
		"",
	]
	if not deps.all_available:
		lines.append("💡 Install missing dependencies with:")
		lines.append(install_hint)
	else:
		lines.append("🎉 All dependencies available!")
	return lines
