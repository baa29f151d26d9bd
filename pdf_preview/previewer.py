#!/usr/bin/env python3
"""
Preview orchestration: extension check -> dependency probe -> background
render -> formatted result, with the scratch directory removed on every path.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
import logging

# PIP3 modules
from PIL import Image

# local repo modules
from .config import PreviewConfig
from .dependencies import DependencyStatus, check_dependencies
from .formatter import (
	build_failure_lines,
	build_non_pdf_lines,
	build_success_lines,
	file_type,
)
from .hosts import Host, PreviewBuffer
from .pdfinfo_utils import get_pdf_info
from .thumbnail import build_rasterize_command, locate_output

logger = logging.getLogger(__name__)
LAUNCH_FAILED_EXIT_CODE = -1

#============================================


class PreviewState(Enum):
	IDLE = "idle"
	EXTENSION_CHECKED = "extension_checked"
	NON_PDF = "non_pdf"
	DEPENDENCIES_CHECKED = "dependencies_checked"
	DEPENDENCY_FAILURE = "dependency_failure"
	RENDERING = "rendering"
	RENDER_SUCCESS = "render_success"
	RENDER_FAILURE = "render_failure"
	DONE = "done"


#============================================


@dataclass(frozen=True, slots=True)
class PreviewRequest:
	"""
	Highlighted picker entry.

	Attributes:
		value: Entry name relative to the picker's working directory.
		cwd: Picker working directory.
	"""
	value: str
	cwd: Path | str = "."

	@property
	def path(self) -> Path:
		return Path(self.cwd).expanduser() / self.value

	@property
	def resolved_path(self) -> Path:
		return self.path.resolve()

	@property
	def extension(self) -> str:
		return file_type(self.value)

	@property
	def is_pdf(self) -> bool:
		# case-sensitive on purpose: "REPORT.PDF" is not previewed
		return str(self.path).endswith(".pdf")


#============================================


@dataclass(frozen=True, slots=True)
class RenderResult:
	"""
	Rasterizer outcome.

	Attributes:
		exit_code: Process exit code.
		output_path: Rendered image, or None when nothing was written.
	"""
	exit_code: int
	output_path: Path | None = None

	@property
	def succeeded(self) -> bool:
		return self.exit_code == 0 and self.output_path is not None


#============================================


@dataclass(slots=True)
class PreviewJob:
	"""
	Bookkeeping for one preview request.
	"""
	request: PreviewRequest
	states: list[PreviewState] = field(default_factory=lambda: [PreviewState.IDLE])
	scratch_dir: Path | None = None
	result: RenderResult | None = None
	cleanups: int = 0

	@property
	def state(self) -> PreviewState:
		return self.states[-1]

	@property
	def done(self) -> bool:
		return self.state is PreviewState.DONE

	def advance(self, state: PreviewState) -> None:
		logger.debug("%s: %s -> %s", self.request.value, self.state.value, state.value)
		self.states.append(state)


#============================================


def read_image_size(path: Path) -> tuple[int, int] | None:
	"""
	Read PNG dimensions.

	Args:
		path: Image path.

	Returns:
		(width, height) or None when the file is not a readable image.
	"""
	try:
		with Image.open(path) as image:
			return image.size
	except OSError:
		return None


#============================================


class Previewer:
	"""
	Turns picker entries into preview text.
	"""

	#============================================
	def __init__(self, host: Host, config: PreviewConfig | None = None) -> None:
		self.host = host
		self.config = config or PreviewConfig()

	#============================================
	def preview(self, request: PreviewRequest, buffer: PreviewBuffer) -> PreviewJob:
		"""
		Start a preview; PDF renders finish when the host runs the job callback.

		Args:
			request: Highlighted entry.
			buffer: Display surface for the result.

		Returns:
			PreviewJob tracking the request.
		"""
		job = PreviewJob(request=request)
		job.advance(PreviewState.EXTENSION_CHECKED)
		if not request.is_pdf:
			job.advance(PreviewState.NON_PDF)
			self.host.replace_buffer_content(buffer, build_non_pdf_lines(request.value))
			job.advance(PreviewState.DONE)
			return job

		deps = check_dependencies(self.host, self.config)
		job.advance(PreviewState.DEPENDENCIES_CHECKED)
		if not deps.all_available:
			job.advance(PreviewState.DEPENDENCY_FAILURE)
			self.host.replace_buffer_content(buffer, self._failure_lines(request, deps))
			job.advance(PreviewState.DONE)
			return job

		try:
			job.scratch_dir = self.host.make_scratch_dir()
		except OSError as exc:
			logger.warning("Could not create scratch directory: %s", exc)
			job.advance(PreviewState.RENDER_FAILURE)
			self.host.replace_buffer_content(buffer, self._failure_lines(request, deps))
			job.advance(PreviewState.DONE)
			return job

		argv, expected = build_rasterize_command(
			request.path,
			job.scratch_dir,
			rasterizer=self.config.rasterizer,
			scale_to_x=self.config.scale_to_x,
		)
		logger.info("Rendering %s", request.path)
		logger.debug("Render command: %s", " ".join(argv))
		job.advance(PreviewState.RENDERING)

		def on_exit(exit_code: int) -> None:
			self._finish(job, buffer, deps, expected, exit_code)

		try:
			self.host.run_process_async(argv, on_exit, timeout=self.config.render_timeout)
		except Exception:
			logger.exception("Could not launch %s", argv[0])
			self._finish(job, buffer, deps, expected, LAUNCH_FAILED_EXIT_CODE)
		return job

	#============================================
	def _finish(
		self,
		job: PreviewJob,
		buffer: PreviewBuffer,
		deps: DependencyStatus,
		expected: Path,
		exit_code: int,
	) -> None:
		"""
		Handle render completion; always removes the scratch directory.
		"""
		try:
			try:
				lines = self._result_lines(job, deps, expected, exit_code)
			except Exception:
				logger.exception("Preview of %s failed", job.request.value)
				job.advance(PreviewState.RENDER_FAILURE)
				lines = self._failure_lines(job.request, deps)
			self.host.replace_buffer_content(buffer, lines)
		finally:
			if job.scratch_dir is not None:
				self.host.delete_directory(job.scratch_dir)
				job.cleanups += 1
			job.advance(PreviewState.DONE)

	#============================================
	def _result_lines(
		self,
		job: PreviewJob,
		deps: DependencyStatus,
		expected: Path,
		exit_code: int,
	) -> list[str]:
		output = locate_output(expected) if exit_code == 0 else None
		job.result = RenderResult(exit_code=exit_code, output_path=output)
		if not job.result.succeeded:
			logger.info("Render of %s failed (exit %s)", job.request.value, exit_code)
			job.advance(PreviewState.RENDER_FAILURE)
			return self._failure_lines(job.request, deps)
		job.advance(PreviewState.RENDER_SUCCESS)
		info_lines = get_pdf_info(self.host, job.request.path, self.config.info_tool)
		return build_success_lines(
			job.request.value,
			job.request.path,
			output,
			info_lines,
			image_size=read_image_size(output),
		)

	#============================================
	def _failure_lines(self, request: PreviewRequest, deps: DependencyStatus) -> list[str]:
		return build_failure_lines(
			request.value,
			deps,
			self.config.resolved_install_hint(),
		)
