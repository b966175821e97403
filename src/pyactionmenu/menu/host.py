# ---------------------------------------------------------------------------
# File: host.py
# ---------------------------------------------------------------------------
# Description:
#	MenuHost protocol: the editor primitives the action menu needs.
#
# Notes:
#	- The menu core only talks to the editor through this interface.
#	- pyactionmenu.ui.tk_host.TkMenuHost is the bundled Tk implementation.
#	- Key names: "<Return>", "<Escape>", or a single character.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/08/2026	Paul G. LeDuc				Pass icon to create_overlay (row colour)
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable

from pyactionmenu.menu.options import MenuIcon


CONFIRM_KEY = "<Return>"
CANCEL_KEY = "<Escape>"

KeyHandler = Callable[[], None]
FocusRef = Any
OverlayHandle = Any


@runtime_checkable
class MenuHost(Protocol):
	"""
	Minimal interface the menu core needs from an editor.
	"""

	def capture_focus(self) -> FocusRef:
		...

	def restore_focus(self, ref: FocusRef) -> None:
		...

	def create_overlay(self, lines: Sequence[str], icon: Optional[MenuIcon] = None) -> OverlayHandle:
		...

	def destroy_overlay(self, handle: OverlayHandle) -> None:
		...

	def install_key_handler(self, key: str, fn: KeyHandler) -> None:
		...

	def remove_key_handler(self, key: str) -> None:
		...

	def get_highlighted_index(self) -> int:
		...

	def invoke_named_callback(self, name: str, index: int, item: Any) -> None:
		...
