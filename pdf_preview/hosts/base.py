#!/usr/bin/env python3
"""
Host capability interface for previews.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Protocol

#============================================


@dataclass(slots=True)
class ProcessResult:
	"""
	Outcome of a blocking process run.

	Attributes:
		returncode: Process exit code (127 when the executable was not found).
		stdout: Captured standard output text.
	"""
	returncode: int
	stdout: str = ""


#============================================


@dataclass(slots=True)
class PreviewBuffer:
	"""
	Display surface that receives full-content replacements.

	Attributes:
		name: Buffer label.
		lines: Current buffer content.
		valid: False once the owner has closed the buffer.
	"""
	name: str = "PDF Preview"
	lines: list[str] = field(default_factory=list)
	valid: bool = True


#============================================


class Host(Protocol):
	def probe_executable(self, name: str) -> bool:
		"""
		Check whether an executable resolves on the search path.
		"""

	def run_process(self, argv: list[str]) -> ProcessResult:
		"""
		Run a process to completion and capture stdout.
		"""

	def run_process_async(
		self,
		argv: list[str],
		on_done: Callable[[int], None],
		timeout: float | None = None,
	) -> None:
		"""
		Start a background process; on_done(exit_code) runs on the UI context.
		"""

	def make_scratch_dir(self) -> Path:
		"""
		Create a fresh uniquely named scratch directory.
		"""

	def delete_directory(self, path: Path) -> None:
		"""
		Recursively delete a directory.
		"""

	def replace_buffer_content(self, buffer: PreviewBuffer, lines: list[str]) -> None:
		"""
		Replace all lines of a display buffer.
		"""

	def spawn_detached(self, argv: list[str]) -> bool:
		"""
		Start a fire-and-forget process detached from the caller.
		"""
