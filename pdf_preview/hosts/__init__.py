#!/usr/bin/env python3
from __future__ import annotations

from .base import Host, PreviewBuffer, ProcessResult
from .local import LocalHost

__all__ = ["Host", "LocalHost", "PreviewBuffer", "ProcessResult"]
