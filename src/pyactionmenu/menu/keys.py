# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	KeyMap for a menu session (key name -> action).
#
# Notes:
#	Pure mapping; installing the handlers on the host is InputDispatcher's job.
#	The dispatcher removes exactly the keys recorded here on close, and every
#	installed handler looks its action up here when the key arrives.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/19/2026	Paul G. LeDuc				Drop unbind/overwrite (bindings live for one session)
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class MenuAction(str, Enum):
	CONFIRM = "confirm"
	CANCEL = "cancel"
	SHORTCUT = "shortcut"


@dataclass
class KeyMap:
	"""
	KeyMap

	Stores the session's bindings of key names (e.g., "<Return>", "s") to MenuActions.
	"""
	_bindings: dict[str, MenuAction] = field(default_factory=dict)

	def bind(self, key: str, action: MenuAction) -> None:
		if not key:
			raise ValueError("key must be a non-empty string")

		if key in self._bindings:
			raise ValueError(f"Key binding already exists for {key!r}")

		self._bindings[key] = action

	def resolve(self, key: str) -> Optional[MenuAction]:
		return self._bindings.get(key)

	def keys(self) -> list[str]:
		return list(self._bindings.keys())

	def clear(self) -> None:
		self._bindings.clear()
