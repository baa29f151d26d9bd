#!/usr/bin/env python3
"""
Tests for opening entries with the default app.
"""

from pathlib import Path

from pdf_preview.config import PreviewConfig, default_open_command
from pdf_preview.opener import open_entry
from pdf_preview.previewer import PreviewRequest
from conftest import FakeHost


def test_open_closes_picker_then_spawns(tmp_path: Path):
	host = FakeHost(tmp_path)
	events: list[str] = []

	def close() -> None:
		events.append("close")
		assert host.spawned == []

	cfg = PreviewConfig(open_command=["open"])
	request = PreviewRequest(value="book.pdf", cwd=tmp_path)
	assert open_entry(host, request, cfg, on_close=close) is True
	assert events == ["close"]
	assert host.spawned == [["open", str((tmp_path / "book.pdf").resolve())]]


def test_open_reports_spawn_failure(tmp_path: Path):
	host = FakeHost(tmp_path)
	host.spawn_ok = False
	request = PreviewRequest(value="book.pdf", cwd=tmp_path)
	assert open_entry(host, request, PreviewConfig(open_command=["nope"])) is False


def test_default_open_commands():
	assert default_open_command("Darwin") == ["open"]
	assert default_open_command("Linux") == ["xdg-open"]
	assert default_open_command("Windows") == ["cmd", "/c", "start", ""]
