# ---------------------------------------------------------------------------
# File: gate.py
# ---------------------------------------------------------------------------
# Description:
#	CallbackGate: one-shot latch around the caller's named callback.
#
# Notes:
#	- The first fire()/fire_cancel() invokes the host callback; the rest are no-ops.
#	- The latch closes before the host call, so a callback that raises
#	  still counts as delivered.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any

from pyactionmenu.core.logging import get_app_logger
from pyactionmenu.menu.host import MenuHost


CANCEL_INDEX = -1

_log = get_app_logger("menu.gate")


class CallbackGate:
	"""
	CallbackGate

	Guarantees a single invoke_named_callback(name, index, item) per session.
	"""

	def __init__(self, host: MenuHost, callback_name: str) -> None:
		self._host = host
		self._callback_name = callback_name
		self._fired = False

	@property
	def fired(self) -> bool:
		return self._fired

	@property
	def callback_name(self) -> str:
		return self._callback_name

	def fire(self, index: int, item: Any) -> bool:
		"""
		Report a selection. Returns True if this call delivered the outcome.
		"""
		return self._invoke(index, item)

	def fire_cancel(self) -> bool:
		"""
		Report a cancellation as (-1, None).
		"""
		return self._invoke(CANCEL_INDEX, None)

	def _invoke(self, index: int, item: Any) -> bool:
		if self._fired:
			_log.debug("Callback %r already delivered; dropping (%d, %r)", self._callback_name, index, item)
			return False

		self._fired = True
		self._host.invoke_named_callback(self._callback_name, index, item)
		return True

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} callback={self._callback_name!r} fired={self._fired}>"
