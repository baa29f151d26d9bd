#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from pathlib import Path

# local repo modules
from .hosts import Host

INFO_HEADER = "PDF Information:"
INFO_RULE = "=" * 50
INFO_UNAVAILABLE = "Could not retrieve PDF information"

#============================================


def get_pdf_info(host: Host, path: Path | str, info_tool: str = "pdfinfo") -> list[str]:
	"""
	Read PDF metadata lines with the info tool.

	Args:
		host: Host that runs the process.
		path: PDF file path.
		info_tool: Info executable name.

	Returns:
		Header lines followed by the tool output, or a single placeholder line.
	"""
	result = host.run_process([info_tool, str(path)])
	if result.returncode != 0:
		return [INFO_UNAVAILABLE]
	info_lines = ["", INFO_HEADER, INFO_RULE]
	for line in result.stdout.replace("\r", "\n").split("\n"):
		if line:
			info_lines.append(line)
	return info_lines


#============================================


def parse_pdf_info(lines: list[str]) -> dict[str, str]:
	"""
	Turn "Key:   value" lines into a mapping.

	Args:
		lines: Output lines from get_pdf_info.

	Returns:
		Dictionary of field values.
	"""
	data: dict[str, str] = {}
	for line in lines:
		if line in (INFO_HEADER, INFO_RULE) or ":" not in line:
			continue
		key, _, value = line.partition(":")
		key = key.strip()
		if key:
			data[key] = value.strip()
	return data
