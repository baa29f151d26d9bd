#!/usr/bin/env python3
"""
Tests for the command line interface.
"""

from pathlib import Path

import pdf_preview.cli as cli
from pdf_preview.cli import build_config, main, parse_args


def test_build_config_flags(tmp_path: Path):
	args = parse_args(
		["-c", str(tmp_path / "none.yaml"), "--timeout", "0", "list", "-e", ".PDF", "--max-depth", "2", "--hidden"]
	)
	cfg = build_config(args)
	assert cfg.render_timeout is None
	assert cfg.include_extensions == {"pdf"}
	assert cfg.max_depth == 2
	assert cfg.exclude_hidden is False


def test_flags_override_config_file(tmp_path: Path):
	path = tmp_path / "config.yaml"
	path.write_text("render_timeout: 5\nmax_depth: 4\n", encoding="utf-8")
	cfg = build_config(parse_args(["-c", str(path), "--timeout", "9", "list"]))
	assert cfg.render_timeout == 9
	assert cfg.max_depth == 4


def test_preview_non_pdf(tmp_path: Path, capsys):
	code = main(["-c", str(tmp_path / "none.yaml"), "preview", "notes.txt", "--cwd", str(tmp_path)])
	assert code == 0
	out = capsys.readouterr().out.splitlines()
	assert out == ["📄 Not a PDF file", "File: notes.txt", "Type: txt"]


def test_preview_missing_tools(tmp_path: Path, capsys, monkeypatch):
	monkeypatch.setattr(cli.LocalHost, "probe_executable", lambda self, name: False)
	code = main(["-c", str(tmp_path / "none.yaml"), "preview", "book.pdf", "--cwd", str(tmp_path)])
	assert code == 0
	out = capsys.readouterr().out
	assert "Missing dependencies:" in out
	assert not any(tmp_path.iterdir())


def test_check_exit_status(tmp_path: Path, capsys, monkeypatch):
	monkeypatch.setattr(cli.LocalHost, "probe_executable", lambda self, name: name == "pdftoppm")
	assert main(["-c", str(tmp_path / "none.yaml"), "check"]) == 1
	assert "pdfinfo:  ❌" in capsys.readouterr().out
	monkeypatch.setattr(cli.LocalHost, "probe_executable", lambda self, name: True)
	assert main(["-c", str(tmp_path / "none.yaml"), "check"]) == 0


def test_open_uses_spawn(tmp_path: Path, monkeypatch):
	spawned: list[list[str]] = []

	def fake_spawn(self, argv):
		spawned.append(argv)
		return True

	monkeypatch.setattr(cli.LocalHost, "spawn_detached", fake_spawn)
	config = tmp_path / "config.yaml"
	config.write_text("open_command: [my-open]\n", encoding="utf-8")
	assert main(["-c", str(config), "open", "book.pdf", "--cwd", str(tmp_path)]) == 0
	assert spawned == [["my-open", str((tmp_path / "book.pdf").resolve())]]


def test_list_prints_names(tmp_path: Path, capsys):
	(tmp_path / "a.pdf").write_text("x")
	(tmp_path / "b.txt").write_text("x")
	assert main(["-c", str(tmp_path / "none.yaml"), "list", str(tmp_path), "-e", "pdf"]) == 0
	assert capsys.readouterr().out.splitlines() == ["a.pdf"]


def test_bad_config_file(tmp_path: Path, capsys):
	path = tmp_path / "config.json"
	path.write_text("{not json", encoding="utf-8")
	assert main(["-c", str(path), "check"]) == 2


def test_config_file_zero_timeout_matches_flag(tmp_path: Path):
	path = tmp_path / "config.yaml"
	path.write_text("render_timeout: 0\n", encoding="utf-8")
	assert build_config(parse_args(["-c", str(path), "check"])).render_timeout is None
	assert build_config(parse_args(["-c", str(path), "--timeout", "-1", "check"])).render_timeout is None


def test_non_numeric_timeout_in_config(tmp_path: Path):
	path = tmp_path / "config.yaml"
	path.write_text("render_timeout: soon\n", encoding="utf-8")
	assert main(["-c", str(path), "check"]) == 2
