# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#   EditorApp: themed Tk editor window that hosts the action menu.
#
# Notes:
#   - Wires Text editor -> TkMenuHost -> MenuController.
#   - menu_key (default <Control-space>) opens a small demo menu whose
#     callback inserts the chosen label at the cursor.
#
#   Supported cfg keys:
#   - "theme"       ttkthemes theme name (default: "arc")
#   - "menu_key"    Tk key sequence that opens the demo menu
#   - "width", "height"  initial window size (args win over cfg)
#   - logging.* / log_* and telemetry_* keys (see core/)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/10/2026	Paul G. LeDuc				Initial coding / release
# 10/11/2026	Paul G. LeDuc				Use ThemedTk (ttkthemes) as the root window
# 10/12/2026	Paul G. LeDuc				Add demo menu + InsertChoice callback
# ---------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable

import tkinter as tk
from tkinter import ttk

from ttkthemes import ThemedTk

from pyactionmenu.app.callbacks import CallbackRegistry
from pyactionmenu.core.logging import get_app_logger
from pyactionmenu.core.telemetry import Telemetry
from pyactionmenu.menu.controller import MenuController, MenuState
from pyactionmenu.menu.items import RawItem
from pyactionmenu.ui.tk_host import TkMenuHost


DEFAULT_THEME = "arc"
DEFAULT_MENU_KEY = "<Control-space>"
INSERT_CALLBACK = "InsertChoice"

DEMO_ITEMS: tuple[RawItem, ...] = (
	{"word": "Rename", "shortcut": "r", "user_data": "rename"},
	{"word": "Extract function", "shortcut": "e", "user_data": "extract"},
	{"word": "Organize imports", "shortcut": "o", "user_data": "imports"},
	"Format document",
)

_log = get_app_logger()


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)


class EditorApp(ThemedTk):
	"""
	EditorApp

	Themed root window with a single Text editor and an action menu.
	"""

	def __init__(
		self,
		width: int | None = None,
		height: int | None = None,
		title: str | None = None,
		cfg: dict[str, Any] | None = None,
		telemetry: Telemetry | None = None,
	) -> None:
		self.cfg = AppConfig(cfg)
		super().__init__(theme=self.cfg.get("theme", DEFAULT_THEME))

		self.title_text = title or "pyactionmenu"
		self.title(self.title_text)

		# -------------------------------------------------------------------
		# Editor surface
		# -------------------------------------------------------------------

		self.root_frame = ttk.Frame(self)
		self.root_frame.pack(fill="both", expand=True)

		self.editor = tk.Text(self.root_frame, wrap="none", undo=True)
		self.editor.pack(fill="both", expand=True)

		# -------------------------------------------------------------------
		# Menu spine: callbacks -> host -> controller
		# -------------------------------------------------------------------

		self.callbacks = CallbackRegistry()
		self.callbacks.register_fn(
			INSERT_CALLBACK,
			self._insert_choice,
			description="Insert the chosen label at the cursor.",
		)

		self.host = TkMenuHost(editor=self.editor, callbacks=self.callbacks)
		self.menu = MenuController(self.host, telemetry=telemetry)

		self.menu_key = str(self.cfg.get("menu_key", DEFAULT_MENU_KEY))
		self.editor.bind(self.menu_key, self._on_menu_key)

		self.update_idletasks()
		self._apply_geometry(
			width if width is not None else self.cfg.get("width"),
			height if height is not None else self.cfg.get("height"),
		)
		self.editor.focus_set()

	# -----------------------------------------------------------------------
	# Menu API
	# -----------------------------------------------------------------------

	def open_action_menu(
		self,
		items: Iterable[RawItem],
		callback_name: str,
		options: Mapping[str, Any] | None = None,
	) -> None:
		"""
		Open an action menu anchored at the editor cursor.

		The outcome is delivered later to the callback registered as callback_name.
		"""
		self.menu.open(items, callback_name, options)

	def _on_menu_key(self, event: tk.Event) -> str:
		if self.menu.state is MenuState.OPEN:
			return "break"
		self.open_action_menu(DEMO_ITEMS, INSERT_CALLBACK)
		return "break"

	def _insert_choice(self, index: int, item: Any) -> None:
		if index < 0:
			_log.info("Action menu cancelled")
			return

		label = item.get("word", "") if isinstance(item, Mapping) else str(item)
		_log.info("Action menu selected %d: %s", index, label)
		self.editor.insert("insert", label)

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: int | None, height: int | None) -> None:
		screen_w = self.winfo_screenwidth()
		screen_h = self.winfo_screenheight()

		win_w = max(1, min(width if width is not None else screen_w // 2, screen_w))
		win_h = max(1, min(height if height is not None else screen_h // 2, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		y = max(0, (screen_h - win_h) // 2)

		self.geometry(f"{win_w}x{win_h}+{x}+{y}")

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		"""
		Run the Tk event loop.
		"""
		self.mainloop()

	def __str__(self) -> str:
		return f"{self.__class__.__name__}(title={self.title_text!r})"

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} title={self.title_text!r}>"
