# ---------------------------------------------------------------------------
# File: options.py
# ---------------------------------------------------------------------------
# Description:
#	Per-open menu options (icon) and MenuConfig assembly.
#
# Notes:
#	- Options are cosmetic; they never change selection logic.
#	- Unknown option keys are ignored so callers can pass a shared dict.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Validate callback name in MenuConfig.build
# ---------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Optional

from pyactionmenu.menu.errors import MenuConfigError

if TYPE_CHECKING:
	from pyactionmenu.menu.items import MenuItem, RawItem


@dataclass(frozen=True, slots=True)
class MenuIcon:
	"""
	MenuIcon

	character:	Single character appended to the first row.
	foreground:	Colour name the host uses for that row (e.g. "red").
	"""
	character: str
	foreground: str

	@classmethod
	def from_mapping(cls, raw: Any) -> "MenuIcon":
		if not isinstance(raw, Mapping):
			raise MenuConfigError(f"icon must be a mapping, got {type(raw).__name__}")

		character = raw.get("character")
		if not isinstance(character, str) or len(character) != 1:
			raise MenuConfigError(f"icon character must be exactly one character, got {character!r}")

		foreground = raw.get("foreground")
		if not isinstance(foreground, str) or not foreground.strip():
			raise MenuConfigError(f"icon foreground must be a colour name, got {foreground!r}")

		return cls(character=character, foreground=foreground.strip())


@dataclass(frozen=True, slots=True)
class MenuOptions:
	icon: Optional[MenuIcon] = None

	@classmethod
	def from_mapping(cls, options: Mapping[str, Any] | None) -> "MenuOptions":
		if options is None:
			return cls()

		if not isinstance(options, Mapping):
			raise MenuConfigError(f"options must be a mapping, got {type(options).__name__}")

		raw_icon = options.get("icon")
		icon = MenuIcon.from_mapping(raw_icon) if raw_icon is not None else None
		return cls(icon=icon)


@dataclass(frozen=True, slots=True)
class MenuConfig:
	"""
	Everything one open() call needs, validated up front.
	"""
	items: tuple["MenuItem", ...]
	callback_name: str
	icon: Optional[MenuIcon] = None

	@classmethod
	def build(
		cls,
		raw_items: Iterable["RawItem"],
		callback_name: str,
		options: Mapping[str, Any] | None = None,
	) -> "MenuConfig":
		# Local import: items.py imports MenuIcon from this module.
		from pyactionmenu.menu.items import normalize

		items = normalize(raw_items)
		if not items:
			# Nothing is shown and nothing is called back.
			return cls(items=(), callback_name=callback_name)

		if not isinstance(callback_name, str) or not callback_name.strip():
			raise MenuConfigError(f"callback name must be a non-empty string, got {callback_name!r}")

		opts = MenuOptions.from_mapping(options)
		return cls(items=items, callback_name=callback_name, icon=opts.icon)
