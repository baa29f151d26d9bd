#!/usr/bin/env python3
"""
Command line interface for pdf-preview.

Examples:
	fzf --preview 'pdf-preview preview {}' --bind 'enter:execute(pdf-preview open {})'
	pdf-preview list ~/Books -e pdf | fzf
	pdf-preview check
"""

# Standard Library
import argparse
import logging
from pathlib import Path
import sys

# PIP3 modules
import yaml

# local repo modules
from .config import (
	DEFAULT_CONFIG_PATH,
	PreviewConfig,
	apply_user_config,
	load_user_config,
	parse_exts,
	parse_timeout,
)
from .dependencies import check_dependencies
from .formatter import build_readiness_lines
from .hosts import LocalHost, PreviewBuffer
from .opener import open_entry
from .pdfinfo_utils import get_pdf_info
from .previewer import PreviewRequest, Previewer
from .scanner import iter_files

#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Preview PDFs for a fuzzy finder and open them with the default app."
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help=f"Config file, yaml or json (default {DEFAULT_CONFIG_PATH}).",
	)
	parser.add_argument(
		"--timeout",
		dest="render_timeout",
		type=float,
		help="Seconds before a render is killed (0 disables).",
	)
	subparsers = parser.add_subparsers(dest="command", required=True)

	preview_parser = subparsers.add_parser("preview", help="Print the preview for a file.")
	preview_parser.add_argument("file", help="Entry name, relative to --cwd.")
	preview_parser.add_argument("--cwd", dest="cwd", default=".", help="Picker working directory.")

	open_parser = subparsers.add_parser("open", help="Open a file with the default app.")
	open_parser.add_argument("file", help="Entry name, relative to --cwd.")
	open_parser.add_argument("--cwd", dest="cwd", default=".", help="Picker working directory.")

	subparsers.add_parser("check", help="Report whether the PDF tools are installed.")

	list_parser = subparsers.add_parser("list", help="List files for the picker.")
	list_parser.add_argument("root", nargs="?", default=".", help="Folder to list.")
	list_parser.add_argument(
		"-e",
		"--ext",
		dest="extensions",
		action="append",
		help="Include only files with these extensions (repeatable).",
	)
	list_parser.add_argument(
		"--max-depth",
		dest="max_depth",
		type=int,
		help="Maximum directory depth (default unlimited).",
	)
	list_parser.add_argument(
		"--hidden",
		dest="hidden",
		action="store_true",
		help="Include dotfiles.",
	)

	info_parser = subparsers.add_parser("info", help="Print PDF metadata.")
	info_parser.add_argument("file", help="PDF path.")
	return parser.parse_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> PreviewConfig:
	"""
	Build runtime config from the config file and args.
	"""
	config = PreviewConfig()
	if args.config_path:
		config.config_path = Path(args.config_path).expanduser()
	else:
		config.config_path = DEFAULT_CONFIG_PATH.expanduser()
	apply_user_config(config, load_user_config(config.config_path))
	if args.render_timeout is not None:
		config.render_timeout = parse_timeout(args.render_timeout)
	if getattr(args, "extensions", None):
		config.include_extensions = parse_exts(args.extensions)
	if getattr(args, "max_depth", None) is not None:
		config.max_depth = args.max_depth
	if getattr(args, "hidden", False):
		config.exclude_hidden = False
	config.verbose = args.verbose
	return config


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def run_preview(args: argparse.Namespace, config: PreviewConfig, host: LocalHost) -> int:
	previewer = Previewer(host, config)
	buffer = PreviewBuffer()
	previewer.preview(PreviewRequest(value=args.file, cwd=args.cwd), buffer)
	host.wait_idle()
	for line in buffer.lines:
		print(line)
	return 0


#============================================


def run_open(args: argparse.Namespace, config: PreviewConfig, host: LocalHost) -> int:
	request = PreviewRequest(value=args.file, cwd=args.cwd)
	if open_entry(host, request, config):
		print(f"{_color('[OPEN]', '34')} {request.resolved_path}")
		return 0
	print(f"{_color('[OPEN]', '31')} Could not start: {' '.join(config.resolved_open_command())}")
	return 1


#============================================


def run_check(config: PreviewConfig, host: LocalHost) -> int:
	deps = check_dependencies(host, config)
	for line in build_readiness_lines(deps, config.resolved_install_hint()):
		print(line)
	return 0 if deps.all_available else 1


#============================================


def run_list(args: argparse.Namespace, config: PreviewConfig) -> int:
	for name in iter_files(config, Path(args.root)):
		print(name)
	return 0


#============================================


def run_info(args: argparse.Namespace, config: PreviewConfig, host: LocalHost) -> int:
	lines = get_pdf_info(host, Path(args.file).expanduser(), config.info_tool)
	for line in lines:
		print(line)
	return 0 if len(lines) > 1 else 1


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.
	"""
	args = parse_args(argv)
	if args.verbose:
		logging.basicConfig(level=logging.INFO)
	else:
		logging.basicConfig(level=logging.WARNING)
	try:
		config = build_config(args)
	except (OSError, ValueError, yaml.YAMLError) as exc:
		print(f"{_color('[CONFIG]', '31')} {exc}", file=sys.stderr)
		return 2
	host = LocalHost(scratch_root=config.scratch_root)
	if args.command == "preview":
		return run_preview(args, config, host)
	if args.command == "open":
		return run_open(args, config, host)
	if args.command == "check":
		return run_check(config, host)
	if args.command == "list":
		return run_list(args, config)
	return run_info(args, config, host)


#============================================


if __name__ == "__main__":
	sys.exit(main())
