#!/usr/bin/env python3
"""
Open a picker entry with the OS default application.
"""

from __future__ import annotations

# Standard Library
from typing import Callable
import logging

# local repo modules
from .config import PreviewConfig
from .hosts import Host
from .previewer import PreviewRequest

logger = logging.getLogger(__name__)

#============================================


def build_open_command(request: PreviewRequest, config: PreviewConfig) -> list[str]:
	return config.resolved_open_command() + [str(request.resolved_path)]


#============================================


def open_entry(
	host: Host,
	request: PreviewRequest,
	config: PreviewConfig | None = None,
	on_close: Callable[[], None] | None = None,
) -> bool:
	"""
	Close the picker, then launch the default application detached.

	Args:
		host: Host that spawns the process.
		request: Selected entry.
		config: Optional config with an open command override.
		on_close: Callback that closes the calling picker.

	Returns:
		True when the open command was started; its exit code is never observed.
	"""
	config = config or PreviewConfig()
	if on_close is not None:
		on_close()
	argv = build_open_command(request, config)
	logger.info("Opening %s", argv[-1])
	started = host.spawn_detached(argv)
	if not started:
		logger.warning("Open command %s could not be started", argv[0])
	return started
