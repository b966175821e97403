# ---------------------------------------------------------------------------
# File: items.py
# ---------------------------------------------------------------------------
# Description:
#	Canonical menu item model + normalizer for raw caller input.
#
# Notes:
#	- Raw input is either a bare string or a mapping ("record").
#	- Records use "word" for the label (the key editor completion items use);
#	  "display" is accepted as an alias.
#	- The record itself is kept as the payload and handed back verbatim.
#	- Display formatting (shortcut hint, icon) lives in display_lines(), never in payload.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Accept "display" alias for "word"
# 10/08/2026	Paul G. LeDuc				Move icon suffix into display_lines
# ---------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, TypeAlias, Union

from pyactionmenu.menu.errors import InvalidItemError
from pyactionmenu.menu.options import MenuIcon


RawItem: TypeAlias = Union[str, Mapping[str, Any]]

DISPLAY_KEYS: tuple[str, ...] = ("word", "display")
SHORTCUT_KEY = "shortcut"


@dataclass(frozen=True, slots=True)
class MenuItem:
	"""
	MenuItem

	display:	Label shown in the popup (non-empty).
	shortcut:	Single character that selects this item directly, or None.
	payload:	The original record for structured input; None for bare strings.
	"""
	display: str
	shortcut: Optional[str] = None
	payload: Any = None

	@property
	def abbr(self) -> str:
		"""
		Popup text, e.g. "Second [s]".
		"""
		if self.shortcut is None:
			return self.display
		return f"{self.display} [{self.shortcut}]"

	@property
	def value(self) -> Any:
		"""
		What the callback receives for this item (string in, string out; record in, record out).
		"""
		if self.payload is None:
			return self.display
		return self.payload


def normalize(raw: Iterable[RawItem]) -> tuple[MenuItem, ...]:
	"""
	Convert raw caller input into canonical MenuItems, preserving order.

	Raises:
		InvalidItemError: for any element that is not a usable string or record.
	"""
	if isinstance(raw, (str, bytes)) or isinstance(raw, Mapping):
		raise InvalidItemError(f"items must be a sequence of items, got {type(raw).__name__}")

	return tuple(_normalize_one(index, element) for index, element in enumerate(raw))


def display_lines(items: Sequence[MenuItem], icon: MenuIcon | None = None) -> list[str]:
	"""
	Project items into the rows handed to the host overlay.

	The icon character (if any) is appended to the first row only.
	"""
	lines = [item.abbr for item in items]
	if icon is not None and lines:
		lines[0] = f"{lines[0]}{icon.character}"
	return lines


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _normalize_one(index: int, element: Any) -> MenuItem:
	if isinstance(element, str):
		if not element:
			raise InvalidItemError("label must be a non-empty string", index=index)
		return MenuItem(display=element)

	if not isinstance(element, Mapping):
		raise InvalidItemError(
			f"expected a string or a mapping, got {type(element).__name__}",
			index=index,
		)

	display = _record_display(index, element)
	shortcut = _record_shortcut(index, element)
	return MenuItem(display=display, shortcut=shortcut, payload=element)


def _record_display(index: int, record: Mapping[str, Any]) -> str:
	for key in DISPLAY_KEYS:
		if key in record:
			value = record[key]
			if not isinstance(value, str) or not value:
				raise InvalidItemError(f"{key!r} must be a non-empty string, got {value!r}", index=index)
			return value

	raise InvalidItemError("record has no 'word' (display) field", index=index)


def _record_shortcut(index: int, record: Mapping[str, Any]) -> Optional[str]:
	value = record.get(SHORTCUT_KEY)
	if value is None:
		return None

	if not isinstance(value, str) or len(value) != 1:
		raise InvalidItemError(f"shortcut must be exactly one character, got {value!r}", index=index)

	return value
