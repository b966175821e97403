# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyactionmenu (logging, telemetry).
#
# Notes:
#	No Tk imports here; menu/ and the tests depend on this package headless.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from .logging import init_logging, get_logger, get_app_logger
from .telemetry import Telemetry, MemorySink, init_telemetry, get_telemetry

__all__ = [
	"get_logger",
	"get_app_logger",
	"init_logging",
	"Telemetry",
	"MemorySink",
	"init_telemetry",
	"get_telemetry",
]
