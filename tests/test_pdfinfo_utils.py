#!/usr/bin/env python3
"""
Tests for metadata fetching.
"""

from pathlib import Path

from pdf_preview.hosts import ProcessResult
from pdf_preview.pdfinfo_utils import get_pdf_info, parse_pdf_info
from conftest import FakeHost


def test_info_lines_follow_header(tmp_path: Path):
	output = "Title:          Sample\r\nAuthor:         Someone\nPages:          3\n"
	host = FakeHost(tmp_path, info=ProcessResult(returncode=0, stdout=output))
	lines = get_pdf_info(host, tmp_path / "my book.pdf")
	assert host.runs == [["pdfinfo", str(tmp_path / "my book.pdf")]]
	assert lines == [
		"",
		"PDF Information:",
		"=" * 50,
		"Title:          Sample",
		"Author:         Someone",
		"Pages:          3",
	]


def test_nonzero_exit_gives_placeholder(tmp_path: Path):
	host = FakeHost(tmp_path, info=ProcessResult(returncode=1, stdout="Syntax Error"))
	assert get_pdf_info(host, "broken.pdf") == ["Could not retrieve PDF information"]


def test_parse_pdf_info():
	lines = ["", "PDF Information:", "=" * 50, "Title:   A: B", "Pages:   12", "junk"]
	assert parse_pdf_info(lines) == {"Title": "A: B", "Pages": "12"}
