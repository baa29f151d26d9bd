#!/usr/bin/env python3
"""
Probe for the external PDF tools.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass

# local repo modules
from .config import PreviewConfig
from .hosts import Host

#============================================


@dataclass(frozen=True, slots=True)
class DependencyStatus:
	"""
	Availability of the rasterizer and info tool.

	Attributes:
		rasterizer: True when the rasterizer resolves on PATH.
		info_tool: True when the info tool resolves on PATH.
		rasterizer_name: Executable name shown to the user.
		info_tool_name: Executable name shown to the user.
	"""
	rasterizer: bool
	info_tool: bool
	rasterizer_name: str = "pdftoppm"
	info_tool_name: str = "pdfinfo"

	@property
	def all_available(self) -> bool:
		return self.rasterizer and self.info_tool


#============================================


def check_dependencies(host: Host, config: PreviewConfig | None = None) -> DependencyStatus:
	"""
	Probe both tools; nothing is cached between calls.

	Args:
		host: Host used for executable lookup.
		config: Optional config naming the tools.

	Returns:
		DependencyStatus snapshot.
	"""
	config = config or PreviewConfig()
	return DependencyStatus(
		rasterizer=host.probe_executable(config.rasterizer),
		info_tool=host.probe_executable(config.info_tool),
		rasterizer_name=config.rasterizer,
		info_tool_name=config.info_tool,
	)
