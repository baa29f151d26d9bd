#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, fields
from pathlib import Path
import json
import logging
import platform

# PIP3 modules
import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.config/pdf_preview/config.yaml")

#============================================


@dataclass(slots=True)
class PreviewConfig:
	"""
	Runtime configuration settings.

	Attributes:
		rasterizer: Executable that renders a PDF page to PNG.
		info_tool: Executable that prints PDF metadata as text.
		scale_to_x: Thumbnail width in pixels.
		render_timeout: Seconds before a render job is killed (None waits forever).
		open_command: Command prefix used to open files (None picks the platform default).
		scratch_root: Parent folder for scratch directories (None uses the system temp root).
		install_hint: Install instruction shown when tools are missing.
		max_depth: Maximum directory depth when listing files (None is unlimited).
		exclude_hidden: Skip dotfiles when listing.
		include_extensions: Optional extension filter for listing.
		verbose: Verbose logging.
		config_path: Optional user config path.
	"""
	rasterizer: str = "pdftoppm"
	info_tool: str = "pdfinfo"
	scale_to_x: int = 800
	render_timeout: float | None = 30.0
	open_command: list[str] | None = None
	scratch_root: Path | None = None
	install_hint: str | None = None
	max_depth: int | None = None
	exclude_hidden: bool = True
	include_extensions: set[str] | None = None
	verbose: bool = False
	config_path: Path | None = None

	#============================================
	def resolved_install_hint(self) -> str:
		"""
		Install hint for the current platform unless overridden.

		Returns:
			Hint string.
		"""
		if self.install_hint:
			return self.install_hint
		return default_install_hint(platform.system())

	#============================================
	def resolved_open_command(self) -> list[str]:
		"""
		Open command prefix for the current platform unless overridden.

		Returns:
			Command prefix list.
		"""
		if self.open_command:
			return list(self.open_command)
		return default_open_command(platform.system())


#============================================
def default_install_hint(system: str) -> str:
	"""
	Pick the poppler install instruction for an OS name.

	Args:
		system: Value of platform.system().

	Returns:
		Install hint string.
	"""
	if system == "Darwin":
		return "brew install poppler"
	if system == "Windows":
		return "choco install poppler"
	return "sudo apt install poppler-utils"


#============================================
def default_open_command(system: str) -> list[str]:
	"""
	Pick the "open with default application" command for an OS name.

	Args:
		system: Value of platform.system().

	Returns:
		Command prefix; the file path is appended by the caller.
	"""
	if system == "Darwin":
		return ["open"]
	if system == "Windows":
		return ["cmd", "/c", "start", ""]
	return ["xdg-open"]


#============================================
def parse_exts(exts: list[str] | None) -> set[str] | None:
	"""
	Normalize extension filters.

	Args:
		exts: Extensions from CLI or config.

	Returns:
		Set of lowercase extensions or None.
	"""
	if not exts:
		return None
	cleaned: set[str] = set()
	for ext in exts:
		if ext:
			cleaned.add(ext.lower().lstrip("."))
	if not cleaned:
		return None
	return cleaned


#============================================


def load_user_config(config_path: Path | None) -> dict:
	"""
	Load user configuration from yaml or json.

	Args:
		config_path: Path to config file.

	Returns:
		Dictionary of loaded values or empty dict.
	"""
	if not config_path:
		return {}
	config_path = config_path.expanduser()
	if not config_path.exists():
		return {}
	with config_path.open("r", encoding="utf-8") as handle:
		if config_path.suffix.lower() in {".yml", ".yaml"}:
			loaded = yaml.safe_load(handle)
		else:
			loaded = json.load(handle)
	if loaded is None:
		return {}
	if not isinstance(loaded, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping.")
	return loaded


#============================================


def apply_user_config(config: PreviewConfig, data: dict) -> PreviewConfig:
	"""
	Copy known keys from a loaded config mapping.

	Args:
		config: Config to update in place.
		data: Values from load_user_config.

	Returns:
		The same config object.
	"""
	known = {item.name for item in fields(PreviewConfig)}
	for key, value in data.items():
		if key not in known or key in {"config_path", "verbose"}:
			logger.warning("Ignoring unsupported config key: %s", key)
			continue
		if key == "scratch_root" and value is not None:
			value = Path(value).expanduser()
		elif key == "include_extensions":
			value = parse_exts(value)
		elif key == "open_command" and isinstance(value, str):
			value = value.split()
		elif key == "render_timeout":
			value = parse_timeout(value)
		elif key == "scale_to_x":
			value = _parse_number(key, value, int)
			if value <= 0:
				raise ValueError(f"scale_to_x must be positive, got {value}.")
		setattr(config, key, value)
	return config


#============================================


def parse_timeout(value: object) -> float | None:
	"""
	Normalize a render timeout; zero, negative or null disables it.

	Args:
		value: Raw value from a config file or CLI.

	Returns:
		Seconds as float, or None for no timeout.
	"""
	if value is None:
		return None
	seconds = _parse_number("render_timeout", value, float)
	if seconds <= 0:
		return None
	return seconds


#============================================
def _parse_number(key: str, value: object, kind: type) -> float | int:
	if isinstance(value, bool):
		raise ValueError(f"{key} must be a number, got {value!r}.")
	try:
		return kind(value)
	except (TypeError, ValueError) as exc:
		raise ValueError(f"{key} must be a number, got {value!r}.") from exc
