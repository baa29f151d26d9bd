"""
pdf_preview
===========

PDF previews and default-app opening for fuzzy-finder file pickers.
"""

__all__ = [
	"cli",
	"config",
	"dependencies",
	"formatter",
	"hosts",
	"opener",
	"pdfinfo_utils",
	"previewer",
	"scanner",
	"thumbnail",
]
