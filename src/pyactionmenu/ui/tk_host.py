# ---------------------------------------------------------------------------
# File: tk_host.py
# ---------------------------------------------------------------------------
# Description:
#	TkMenuHost: MenuHost implementation over a tk.Text editor.
#
# Notes:
#	- Overlay = undecorated Toplevel + Listbox anchored under the insert line.
#	- One "<Key>" binding on the Listbox consults installed handlers first,
#	  then native navigation (j/Down, k/Up), then Tk's own Listbox bindings.
#	- Navigation clamps at the first/last row.
#	- An overlay destroyed by anything but destroy_overlay() cancels the menu.
#	- The Text widget's state is never touched, so a read-only editor still
#	  gets its menu.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	Paul G. LeDuc				Initial coding / release
# 10/11/2026	Paul G. LeDuc				Colour the icon row with icon.foreground
# 10/12/2026	Paul G. LeDuc				Route KP_Enter to confirm
# 10/19/2026	Paul G. LeDuc				Cancel when the overlay is destroyed externally
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import tkinter as tk

from pyactionmenu.app.callbacks import CallbackRegistry
from pyactionmenu.core.logging import get_app_logger
from pyactionmenu.menu.errors import OverlayCreationError
from pyactionmenu.menu.host import CANCEL_KEY, CONFIRM_KEY, KeyHandler
from pyactionmenu.menu.options import MenuIcon


_log = get_app_logger("tk_host")

_KEYSYM_NAMES: dict[str, str] = {
	"Return": CONFIRM_KEY,
	"KP_Enter": CONFIRM_KEY,
	"Escape": CANCEL_KEY,
}


@dataclass(frozen=True, slots=True)
class TkFocusRef:
	widget: Optional[tk.Misc]
	insert: Optional[str] = None


@dataclass(slots=True)
class TkOverlay:
	toplevel: tk.Toplevel
	listbox: tk.Listbox
	gone: bool = False


@dataclass(slots=True)
class TkMenuHost:
	"""
	TkMenuHost

	editor:		Text widget the menu is anchored to (and whose focus is restored).
	callbacks:	Registry used to resolve named callbacks.
	nav_down:	Key names that move the highlight down.
	nav_up:		Key names that move the highlight up.
	max_rows:	Visible rows before the Listbox scrolls.
	"""
	editor: tk.Text
	callbacks: CallbackRegistry

	nav_down: tuple[str, ...] = ("j", "<Down>")
	nav_up: tuple[str, ...] = ("k", "<Up>")
	max_rows: int = 12

	overlay: Optional[TkOverlay] = field(default=None, init=False)
	_handlers: dict[str, KeyHandler] = field(default_factory=dict, init=False, repr=False)

	# -----------------------------------------------------------------------
	# Focus
	# -----------------------------------------------------------------------

	def capture_focus(self) -> TkFocusRef:
		try:
			widget = self.editor.focus_get()
		except KeyError:
			# focus_get() raises KeyError when focus sits in a Tk-internal widget.
			widget = None

		return TkFocusRef(widget=widget or self.editor, insert=self.editor.index("insert"))

	def restore_focus(self, ref: Any) -> None:
		if not isinstance(ref, TkFocusRef):
			return

		if ref.insert is not None:
			self.editor.mark_set("insert", ref.insert)

		widget = ref.widget
		if widget is not None and int(widget.winfo_exists()) == 1:
			widget.focus_set()

	# -----------------------------------------------------------------------
	# Overlay
	# -----------------------------------------------------------------------

	def create_overlay(self, lines: Sequence[str], icon: Optional[MenuIcon] = None) -> TkOverlay:
		if self.overlay is not None:
			raise OverlayCreationError("A menu overlay is already shown")
		if not lines:
			raise OverlayCreationError("Cannot show an empty menu overlay")

		top: Optional[tk.Toplevel] = None
		try:
			top = tk.Toplevel(self.editor)
			top.overrideredirect(True)

			listbox = tk.Listbox(
				top,
				activestyle="none",
				exportselection=False,
				selectmode="browse",
				height=min(len(lines), self.max_rows),
				width=max(len(line) for line in lines) + 2,
			)
			for line in lines:
				listbox.insert("end", line)

			if icon is not None:
				listbox.itemconfigure(0, foreground=icon.foreground)

			listbox.pack(fill="both", expand=True)
			listbox.selection_set(0)
			listbox.activate(0)
			listbox.bind("<Key>", self._on_key)
			top.bind("<Destroy>", self._on_destroy, add="+")

			top.geometry(f"+{self._anchor_x()}+{self._anchor_y()}")
			listbox.focus_set()
		except tk.TclError as ex:
			if top is not None:
				top.destroy()
			raise OverlayCreationError(f"Tk could not build the menu overlay: {ex}") from ex

		self.overlay = TkOverlay(toplevel=top, listbox=listbox)
		_log.debug("Menu overlay shown with %d row(s)", len(lines))
		return self.overlay

	def destroy_overlay(self, handle: Any) -> None:
		if handle is None:
			return

		if handle is self.overlay:
			self.overlay = None

		if handle.gone:
			return
		handle.gone = True

		if int(handle.toplevel.winfo_exists()) == 1:
			handle.toplevel.destroy()

	def get_highlighted_index(self) -> int:
		if self.overlay is None:
			return -1

		selection = self.overlay.listbox.curselection()
		return int(selection[0]) if selection else -1

	def rows(self) -> list[str]:
		"""
		Rows currently shown in the overlay (empty when closed).
		"""
		if self.overlay is None:
			return []
		return list(self.overlay.listbox.get(0, "end"))

	# -----------------------------------------------------------------------
	# Keys + callbacks
	# -----------------------------------------------------------------------

	def install_key_handler(self, key: str, fn: KeyHandler) -> None:
		self._handlers[key] = fn

	def remove_key_handler(self, key: str) -> None:
		self._handlers.pop(key, None)

	def invoke_named_callback(self, name: str, index: int, item: Any) -> None:
		_log.debug("Invoking menu callback %r with index %d", name, index)
		self.callbacks.invoke(name, index, item)

	def press(self, key: str) -> Optional[str]:
		"""
		Handle one key name as if it was typed into the overlay.

		Returns "break" when the key was consumed.
		"""
		handler = self._handlers.get(key)
		if handler is not None:
			handler()
			return "break"

		if key in self.nav_down:
			self._move(1)
			return "break"

		if key in self.nav_up:
			self._move(-1)
			return "break"

		return None

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _on_key(self, event: tk.Event) -> Optional[str]:
		return self.press(self._key_name(event))

	def _on_destroy(self, event: tk.Event) -> None:
		# <Destroy> also arrives for the Listbox through the Toplevel bindtag.
		overlay = self.overlay
		if overlay is None or str(event.widget) != str(overlay.toplevel):
			return

		self.overlay = None
		overlay.gone = True

		_log.info("Menu overlay destroyed outside the menu; cancelling")
		handler = self._handlers.get(CANCEL_KEY)
		if handler is not None:
			handler()

	@staticmethod
	def _key_name(event: tk.Event) -> str:
		keysym = getattr(event, "keysym", "") or ""
		if keysym in _KEYSYM_NAMES:
			return _KEYSYM_NAMES[keysym]

		char = getattr(event, "char", "") or ""
		if len(char) == 1 and char.isprintable():
			return char

		return f"<{keysym}>"

	def _move(self, delta: int) -> None:
		if self.overlay is None:
			return

		listbox = self.overlay.listbox
		size = int(listbox.size())
		if size == 0:
			return

		current = self.get_highlighted_index()
		target = max(0, min(size - 1, current + delta)) if current >= 0 else 0

		listbox.selection_clear(0, "end")
		listbox.selection_set(target)
		listbox.activate(target)
		listbox.see(target)

	def _anchor_x(self) -> int:
		bbox = self.editor.bbox("insert")
		x = bbox[0] if bbox else 0
		return int(self.editor.winfo_rootx()) + int(x)

	def _anchor_y(self) -> int:
		bbox = self.editor.bbox("insert")
		y = bbox[1] + bbox[3] if bbox else 0
		return int(self.editor.winfo_rooty()) + int(y)
