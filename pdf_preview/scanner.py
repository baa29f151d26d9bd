#!/usr/bin/env python3
"""
File listing for the picker.
"""

from __future__ import annotations

# Standard Library
from pathlib import Path
import os

# local repo modules
from .config import PreviewConfig

#============================================


def iter_files(config: PreviewConfig, root: Path) -> list[str]:
	"""
	List picker candidates under a root.

	Args:
		config: Listing filters.
		root: Picker working directory.

	Returns:
		Sorted POSIX paths relative to root.
	"""
	root = root.expanduser()
	if not root.is_dir():
		return []
	names: list[str] = []
	for dirpath, dirnames, filenames in os.walk(root):
		current = Path(dirpath)
		depth = len(current.relative_to(root).parts)
		if config.exclude_hidden:
			dirnames[:] = [name for name in dirnames if not name.startswith(".")]
		if config.max_depth is not None and depth + 1 >= config.max_depth:
			dirnames[:] = []
		for filename in filenames:
			if config.exclude_hidden and filename.startswith("."):
				continue
			if config.include_extensions:
				ext = Path(filename).suffix.lower().lstrip(".")
				if ext not in config.include_extensions:
					continue
			names.append((current / filename).relative_to(root).as_posix())
	return sorted(names)
