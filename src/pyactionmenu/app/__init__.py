# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for pyactionmenu.
#
# Notes:
#   - Uses lazy exports so importing CallbackRegistry never pulls in Tk/ttkthemes.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"EditorApp",
	"AppConfig",
	"CallbackRegistry",
	"MenuCallback",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"EditorApp": ("pyactionmenu.app.app", "EditorApp"),
	"AppConfig": ("pyactionmenu.app.app", "AppConfig"),
	"CallbackRegistry": ("pyactionmenu.app.callbacks", "CallbackRegistry"),
	"MenuCallback": ("pyactionmenu.app.callbacks", "MenuCallback"),
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
	from pyactionmenu.app.app import EditorApp, AppConfig
	from pyactionmenu.app.callbacks import CallbackRegistry, MenuCallback
