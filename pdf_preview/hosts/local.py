#!/usr/bin/env python3
"""
Local host: real subprocesses, a worker thread per background job, and a
callback queue drained on the calling (UI) thread.
"""

from __future__ import annotations

# Standard Library
from pathlib import Path
from typing import Callable
import logging
import os
import queue
import shutil
import subprocess
import tempfile
import threading
import time

# local repo modules
from .base import PreviewBuffer, ProcessResult

logger = logging.getLogger(__name__)

NOT_FOUND_EXIT_CODE = 127
TIMEOUT_EXIT_CODE = 124
FAILED_EXIT_CODE = 1

#============================================


class LocalHost:
	"""
	Host backed by the local operating system.
	"""

	name = "local"

	#============================================
	def __init__(self, scratch_root: Path | None = None) -> None:
		self.scratch_root = scratch_root
		self._events: queue.Queue = queue.Queue()
		# only touched from the UI thread
		self._in_flight = 0

	#============================================
	def probe_executable(self, name: str) -> bool:
		return shutil.which(name) is not None

	#============================================
	def run_process(self, argv: list[str]) -> ProcessResult:
		"""
		Run a process and capture its stdout.

		Args:
			argv: Command and arguments.

		Returns:
			ProcessResult with exit code and stdout text.
		"""
		try:
			result = subprocess.run(
				argv,
				capture_output=True,
				text=True,
				errors="replace",
				check=False,
			)
		except FileNotFoundError:
			logger.debug("Executable not found: %s", argv[0])
			return ProcessResult(returncode=NOT_FOUND_EXIT_CODE)
		return ProcessResult(returncode=result.returncode, stdout=result.stdout)

	#============================================
	def run_process_async(
		self,
		argv: list[str],
		on_done: Callable[[int], None],
		timeout: float | None = None,
	) -> None:
		"""
		Start a background job; its exit callback waits for process_events().

		Args:
			argv: Command and arguments.
			on_done: Called with the exit code on the UI thread.
			timeout: Seconds before the job is killed, or None.
		"""
		worker = threading.Thread(
			target=self._wait_job,
			args=(argv, on_done, timeout),
			daemon=True,
		)
		worker.start()
		self._in_flight += 1

	#============================================
	def _wait_job(
		self,
		argv: list[str],
		on_done: Callable[[int], None],
		timeout: float | None,
	) -> None:
		exit_code = FAILED_EXIT_CODE
		try:
			completed = subprocess.run(
				argv,
				stdin=subprocess.DEVNULL,
				stdout=subprocess.DEVNULL,
				stderr=subprocess.DEVNULL,
				timeout=timeout,
				check=False,
			)
			exit_code = completed.returncode
		except subprocess.TimeoutExpired:
			logger.warning("Job exceeded %ss and was killed: %s", timeout, argv[0])
			exit_code = TIMEOUT_EXIT_CODE
		except OSError as exc:
			logger.warning("Job failed to start (%s): %s", exc.__class__.__name__, argv[0])
			exit_code = NOT_FOUND_EXIT_CODE
		except Exception:
			logger.exception("Job crashed: %s", argv[0])
		finally:
			# on_done must run once per job or the scratch directory leaks
			self._events.put((on_done, exit_code))

	#============================================
	def pending_jobs(self) -> int:
		return self._in_flight

	#============================================
	def process_events(self, timeout: float | None = None) -> int:
		"""
		Run queued job callbacks on the calling thread.

		Args:
			timeout: Seconds to wait for the first callback (None blocks).

		Returns:
			Number of callbacks run.
		"""
		handled = 0
		try:
			event = self._events.get(timeout=timeout)
		except queue.Empty:
			return handled
		while True:
			on_done, exit_code = event
			try:
				on_done(exit_code)
			finally:
				self._in_flight -= 1
				handled += 1
			try:
				event = self._events.get_nowait()
			except queue.Empty:
				return handled

	#============================================
	def wait_idle(self, timeout: float | None = None) -> bool:
		"""
		Process callbacks until no background job remains.

		Args:
			timeout: Overall seconds to wait (None blocks).

		Returns:
			True when idle, False on timeout.
		"""
		deadline = None if timeout is None else time.monotonic() + timeout
		while self._in_flight > 0:
			remaining = None
			if deadline is not None:
				remaining = deadline - time.monotonic()
				if remaining <= 0:
					return False
			self.process_events(timeout=remaining)
		return True

	#============================================
	def make_scratch_dir(self) -> Path:
		root = None
		if self.scratch_root is not None:
			self.scratch_root.mkdir(parents=True, exist_ok=True)
			root = str(self.scratch_root)
		scratch = Path(tempfile.mkdtemp(prefix="pdf_preview_", dir=root))
		logger.debug("Created scratch directory %s", scratch)
		return scratch

	#============================================
	def delete_directory(self, path: Path) -> None:
		if not path.exists():
			return
		try:
			shutil.rmtree(path)
		except OSError as exc:
			logger.warning("Could not delete %s: %s", path, exc)
			return
		logger.debug("Deleted scratch directory %s", path)

	#============================================
	def replace_buffer_content(self, buffer: PreviewBuffer, lines: list[str]) -> None:
		if not buffer.valid:
			logger.debug("Buffer %s closed; dropping %d lines", buffer.name, len(lines))
			return
		buffer.lines = list(lines)

	#============================================
	def spawn_detached(self, argv: list[str]) -> bool:
		"""
		Start a process that outlives this one; its exit code is never read.

		Args:
			argv: Command and arguments.

		Returns:
			True when the process was started.
		"""
		kwargs: dict[str, object] = {}
		if os.name == "nt":
			kwargs["creationflags"] = (
				subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
			)
		else:
			kwargs["start_new_session"] = True
		try:
			subprocess.Popen(
				argv,
				stdin=subprocess.DEVNULL,
				stdout=subprocess.DEVNULL,
				stderr=subprocess.DEVNULL,
				**kwargs,
			)
		except OSError as exc:
			logger.warning("Could not start %s: %s", argv[0], exc)
			return False
		return True
