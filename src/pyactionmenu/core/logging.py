# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyactionmenu (stdlib logging).
#
# Notes:
#	- Uses Python stdlib logging only.
#	- Safe to call before any Tk window exists.
#	- Idempotent initialization (won't duplicate handlers).
#	- Every setting accepts a dotted key and a flat legacy key (first match wins):
#
#		level		"logging.level", "log_level"			(default: "INFO")
#		console		"logging.console", "log_console"		(default: True)
#		file		"logging.file", "log_file"				(default: None)
#		file_mode	"logging.file_mode", "log_file_mode"	(default: "a")
#		reset_root	"logging.reset_root", "log_reset_root"	(default: True)
#		format		"logging.format", "log_format"			(default: _DEFAULT_FORMAT)
#		datefmt		"logging.datefmt", "log_datefmt"		(default: _DEFAULT_DATEFMT)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/05/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Fold dotted/flat key lookup into _cfg_first
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any
import logging
import os


_APP_LOGGER = "pyactionmenu.app"
_DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ---------------------------------------------------------------------------
# Module-scoped state (idempotent init)
# ---------------------------------------------------------------------------

_INITIALIZED: bool = False
_CONFIG_SIGNATURE: tuple[Any, ...] | None = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	"""
	Return a logger by explicit name.
	"""
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()			-> pyactionmenu.app
		get_app_logger("menu")		-> pyactionmenu.app.menu
		get_app_logger("tk_host")	-> pyactionmenu.app.tk_host
	"""
	if component:
		return logging.getLogger(f"{_APP_LOGGER}.{component}")
	return logging.getLogger(_APP_LOGGER)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Initialize stdlib logging for pyactionmenu.

	Safe to call repeatedly. The root logger is only reconfigured when the
	resolved settings differ from the previous call.

	Args:
		cfg:
			AppConfig, dict, or anything exposing get(key, default).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE

	level = _coerce_level(_cfg_first(cfg, "level", "INFO"))
	console_enabled = bool(_cfg_first(cfg, "console", True))
	log_file_raw = _cfg_first(cfg, "file", None)
	log_file = str(log_file_raw) if log_file_raw else None
	file_mode = _coerce_file_mode(_cfg_first(cfg, "file_mode", "a"))
	reset_root = bool(_cfg_first(cfg, "reset_root", True))
	fmt = str(_cfg_first(cfg, "format", _DEFAULT_FORMAT))
	datefmt = str(_cfg_first(cfg, "datefmt", _DEFAULT_DATEFMT))

	signature: tuple[Any, ...] = (
		level,
		console_enabled,
		log_file,
		file_mode,
		reset_root,
		fmt,
		datefmt,
	)

	if _INITIALIZED and _CONFIG_SIGNATURE == signature:
		return

	_configure_root_logger(
		level=level,
		console_enabled=console_enabled,
		log_file=log_file,
		file_mode=file_mode,
		fmt=fmt,
		datefmt=datefmt,
		reset_root=reset_root,
	)

	_INITIALIZED = True
	_CONFIG_SIGNATURE = signature


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_first(cfg: Any | None, setting: str, default: Any = None) -> Any:
	"""
	Look up "logging.<setting>" then "log_<setting>"; fall back to default.
	"""
	for key in (f"logging.{setting}", f"log_{setting}"):
		value = _cfg_get(cfg, key, None)
		if value is not None:
			return value
	return default


def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, default)

	try:
		return cfg[key]  # type: ignore[index]
	except (KeyError, IndexError, TypeError):
		return default


def _coerce_level(level: Any) -> int:
	"""
	Convert common representations of logging levels to an int.
	"""
	if isinstance(level, bool):
		return logging.INFO

	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = getattr(logging, val, None)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	"""
	Only "a" or "w" are accepted for the FileHandler.
	"""
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


def _configure_root_logger(
	*,
	level: int,
	console_enabled: bool,
	log_file: str | None,
	file_mode: str,
	fmt: str,
	datefmt: str,
	reset_root: bool,
) -> None:
	root = logging.getLogger()
	root.setLevel(level)

	if reset_root:
		for h in list(root.handlers):
			root.removeHandler(h)

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console_enabled:
		ch = logging.StreamHandler()
		ch.setLevel(level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if log_file:
		parent = os.path.dirname(os.path.abspath(log_file))
		if parent:
			os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(log_file, mode=file_mode, encoding="utf-8")
		fh.setLevel(level)
		fh.setFormatter(formatter)
		root.addHandler(fh)


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Reset module-scoped init state (intended for unit tests only).
	"""
	global _INITIALIZED, _CONFIG_SIGNATURE
	_INITIALIZED = False
	_CONFIG_SIGNATURE = None
