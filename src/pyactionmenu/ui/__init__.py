# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for pyactionmenu (Tk host adapter).
#
# Notes:
#   - Lazy exports (PEP 562); importing the package does not import tkinter.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"TkMenuHost",
	"TkFocusRef",
	"TkOverlay",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"TkMenuHost": ("pyactionmenu.ui.tk_host", "TkMenuHost"),
	"TkFocusRef": ("pyactionmenu.ui.tk_host", "TkFocusRef"),
	"TkOverlay": ("pyactionmenu.ui.tk_host", "TkOverlay"),
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
	from pyactionmenu.ui.tk_host import TkMenuHost, TkFocusRef, TkOverlay
