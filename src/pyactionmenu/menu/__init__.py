# ---------------------------------------------------------------------------
# File: menu/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public surface of the action menu core (toolkit-agnostic).
#
# Notes:
#   - Uses lazy exports (PEP 562), same as pyactionmenu.app / pyactionmenu.ui.
#   - Inside menu/ modules import specific modules, never this package.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"MenuController", "MenuState",
	"MenuItem", "normalize", "display_lines",
	"MenuIcon", "MenuOptions", "MenuConfig",
	"ShortcutIndex",
	"CallbackGate",
	"OverlaySession", "Session",
	"InputDispatcher", "MenuOutcome",
	"MenuHost", "CONFIRM_KEY", "CANCEL_KEY",
	"ActionMenuError", "InvalidItemError", "MenuConfigError",
	"OverlayCreationError", "ReentrantOpenError",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"MenuController": ("pyactionmenu.menu.controller", "MenuController"),
	"MenuState": ("pyactionmenu.menu.controller", "MenuState"),

	"MenuItem": ("pyactionmenu.menu.items", "MenuItem"),
	"normalize": ("pyactionmenu.menu.items", "normalize"),
	"display_lines": ("pyactionmenu.menu.items", "display_lines"),

	"MenuIcon": ("pyactionmenu.menu.options", "MenuIcon"),
	"MenuOptions": ("pyactionmenu.menu.options", "MenuOptions"),
	"MenuConfig": ("pyactionmenu.menu.options", "MenuConfig"),

	"ShortcutIndex": ("pyactionmenu.menu.shortcuts", "ShortcutIndex"),
	"CallbackGate": ("pyactionmenu.menu.gate", "CallbackGate"),
	"OverlaySession": ("pyactionmenu.menu.session", "OverlaySession"),
	"Session": ("pyactionmenu.menu.session", "Session"),
	"InputDispatcher": ("pyactionmenu.menu.dispatcher", "InputDispatcher"),
	"MenuOutcome": ("pyactionmenu.menu.dispatcher", "MenuOutcome"),

	"MenuHost": ("pyactionmenu.menu.host", "MenuHost"),
	"CONFIRM_KEY": ("pyactionmenu.menu.host", "CONFIRM_KEY"),
	"CANCEL_KEY": ("pyactionmenu.menu.host", "CANCEL_KEY"),

	"ActionMenuError": ("pyactionmenu.menu.errors", "ActionMenuError"),
	"InvalidItemError": ("pyactionmenu.menu.errors", "InvalidItemError"),
	"MenuConfigError": ("pyactionmenu.menu.errors", "MenuConfigError"),
	"OverlayCreationError": ("pyactionmenu.menu.errors", "OverlayCreationError"),
	"ReentrantOpenError": ("pyactionmenu.menu.errors", "ReentrantOpenError"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyactionmenu.menu.controller import MenuController, MenuState
	from pyactionmenu.menu.items import MenuItem, normalize, display_lines
	from pyactionmenu.menu.options import MenuIcon, MenuOptions, MenuConfig
	from pyactionmenu.menu.shortcuts import ShortcutIndex
	from pyactionmenu.menu.gate import CallbackGate
	from pyactionmenu.menu.session import OverlaySession, Session
	from pyactionmenu.menu.dispatcher import InputDispatcher, MenuOutcome
	from pyactionmenu.menu.host import MenuHost, CONFIRM_KEY, CANCEL_KEY
	from pyactionmenu.menu.errors import (
		ActionMenuError,
		InvalidItemError,
		MenuConfigError,
		OverlayCreationError,
		ReentrantOpenError,
	)
