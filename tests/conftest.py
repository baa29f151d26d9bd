"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import shutil
import sys
from pathlib import Path


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()

from pdf_preview.hosts import PreviewBuffer, ProcessResult  # noqa: E402


class FakeHost:
	"""
	Test-only host that records calls instead of touching the system.
	"""

	def __init__(
		self,
		tmp_path: Path,
		available: set[str] | None = None,
		render_exit: int = 0,
		write_output: str | None = "preview-1.png",
		info: ProcessResult | None = None,
	) -> None:
		self.tmp_path = tmp_path
		self.available = {"pdftoppm", "pdfinfo"} if available is None else available
		self.render_exit = render_exit
		self.write_output = write_output
		self.info = info or ProcessResult(returncode=0, stdout="Title: Sample\nPages: 3\n")
		self.probes: list[str] = []
		self.runs: list[list[str]] = []
		self.async_runs: list[list[str]] = []
		self.timeouts: list[float | None] = []
		self.pending: list = []
		self.created: list[Path] = []
		self.deleted: list[Path] = []
		self.spawned: list[list[str]] = []
		self.spawn_ok = True

	def probe_executable(self, name: str) -> bool:
		self.probes.append(name)
		return name in self.available

	def run_process(self, argv: list[str]) -> ProcessResult:
		self.runs.append(argv)
		return self.info

	def run_process_async(self, argv, on_done, timeout=None) -> None:
		self.async_runs.append(argv)
		self.timeouts.append(timeout)
		self.pending.append((argv, on_done))

	def finish_jobs(self) -> None:
		"""
		Simulate the rasterizer exiting, then run callbacks.
		"""
		jobs, self.pending = self.pending, []
		for argv, on_done in jobs:
			if self.write_output:
				out_dir = Path(argv[-1]).parent
				(out_dir / self.write_output).write_bytes(b"not really a png")
			on_done(self.render_exit)

	def make_scratch_dir(self) -> Path:
		scratch = self.tmp_path / f"scratch{len(self.created)}"
		scratch.mkdir()
		self.created.append(scratch)
		return scratch

	def delete_directory(self, path: Path) -> None:
		self.deleted.append(path)
		shutil.rmtree(path, ignore_errors=True)

	def replace_buffer_content(self, buffer: PreviewBuffer, lines: list[str]) -> None:
		if buffer.valid:
			buffer.lines = list(lines)

	def spawn_detached(self, argv: list[str]) -> bool:
		self.spawned.append(argv)
		return self.spawn_ok
