# ---------------------------------------------------------------------------
# File: shortcuts.py
# ---------------------------------------------------------------------------
# Description:
#	ShortcutIndex: shortcut character -> item index.
#
# Notes:
#	- First item claiming a character wins; later claims are ignored (not an error).
#	- Read-only after build().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from pyactionmenu.core.logging import get_app_logger
from pyactionmenu.menu.items import MenuItem


_log = get_app_logger("menu.shortcuts")


@dataclass(frozen=True, slots=True, eq=False)
class ShortcutIndex(Mapping[str, int]):
	"""
	ShortcutIndex

	Immutable mapping from a shortcut character to the index of the item that owns it.
	"""
	_by_char: dict[str, int] = field(default_factory=dict)

	@classmethod
	def build(cls, items: Sequence[MenuItem]) -> "ShortcutIndex":
		by_char: dict[str, int] = {}

		for index, item in enumerate(items):
			if item.shortcut is None:
				continue

			if item.shortcut in by_char:
				_log.debug(
					"Shortcut %r on item %d ignored; already bound to item %d",
					item.shortcut,
					index,
					by_char[item.shortcut],
				)
				continue

			by_char[item.shortcut] = index

		return cls(by_char)

	def __getitem__(self, char: str) -> int:
		return self._by_char[char]

	def __iter__(self) -> Iterator[str]:
		return iter(self._by_char)

	def __len__(self) -> int:
		return len(self._by_char)

	def lookup(self, char: str) -> Optional[int]:
		return self._by_char.get(char)
