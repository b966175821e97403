# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Exception types raised by the action menu.
#
# Notes:
#	- Everything here is raised synchronously from MenuController.open().
#	- Each error also subclasses the closest builtin so callers can catch broadly.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Add MenuConfigError for options/callback name
# ---------------------------------------------------------------------------

from __future__ import annotations


class ActionMenuError(Exception):
	"""
	Base class for all action menu errors.
	"""


class InvalidItemError(ActionMenuError, ValueError):
	"""
	A raw menu item could not be normalized.

	index is the position of the offending element in the caller's list.
	"""

	def __init__(self, message: str, *, index: int | None = None) -> None:
		if index is not None:
			message = f"item {index}: {message}"
		super().__init__(message)
		self.index = index


class MenuConfigError(ActionMenuError, ValueError):
	"""
	Callback name or per-open options are malformed.
	"""


class OverlayCreationError(ActionMenuError, RuntimeError):
	"""
	The host could not create the overlay (or bind its keys).
	"""


class ReentrantOpenError(ActionMenuError, RuntimeError):
	"""
	open() was called while another menu session is still open.
	"""
