# ---------------------------------------------------------------------------
# File: callbacks.py
# ---------------------------------------------------------------------------
# Description:
#   Named menu callbacks + registry for pyactionmenu.
#
# Notes:
#   Menus report their outcome by *name*; the Tk host resolves names here.
#   A callback receives (index, item); index is -1 and item None on cancel.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


MenuCallbackHandler = Callable[[int, Any], Any]


@dataclass(frozen=True, slots=True)
class MenuCallback:
	"""
	MenuCallback

	- name:			Unique name menus refer to (required).
	- handler:		Callable receiving (index, item).
	- description:	Optional help text.
	"""
	name: str
	handler: MenuCallbackHandler

	description: Optional[str] = None


class CallbackRegistry:
	"""
	CallbackRegistry

	Stores menu callbacks by name and invokes them.
	"""

	def __init__(self) -> None:
		self._callbacks: dict[str, MenuCallback] = {}

	def register(self, callback: MenuCallback) -> None:
		if not callback.name:
			raise ValueError("Callback name must be a non-empty string")

		if callback.name in self._callbacks:
			raise ValueError(f"Duplicate callback name: {callback.name!r}")

		self._callbacks[callback.name] = callback

	def register_fn(self, name: str, handler: MenuCallbackHandler, description: str | None = None) -> None:
		self.register(MenuCallback(name=name, handler=handler, description=description))

	def unregister(self, name: str) -> None:
		self._callbacks.pop(name, None)

	def has(self, name: str) -> bool:
		return name in self._callbacks

	def get(self, name: str) -> Optional[MenuCallback]:
		return self._callbacks.get(name)

	def names(self) -> list[str]:
		return list(self._callbacks.keys())

	def invoke(self, name: str, index: int, item: Any) -> Any:
		callback = self._callbacks.get(name)
		if callback is None:
			raise KeyError(f"Unknown menu callback: {name!r}")

		return callback.handler(index, item)
