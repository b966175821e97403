# ---------------------------------------------------------------------------
# File: conftest.py
# ---------------------------------------------------------------------------
# Description:
#	Shared fixtures for pyactionmenu tests.
#
# Notes:
#	- FakeHost records every host call in order so tests can assert sequencing.
#	- tk_root skips cleanly when no display is available.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial version
# 10/10/2026	Paul G. LeDuc				Add tk_root fixture
# 10/19/2026	Paul G. LeDuc				Add FakeClock for session spans
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, Sequence

import pytest

from pyactionmenu.core.telemetry import MemorySink, Telemetry
from pyactionmenu.menu.host import CANCEL_KEY, CONFIRM_KEY


class FakeHost:
	"""
	In-memory MenuHost.

	- focus is a plain string ("editor" until an overlay takes it).
	- calls collects (method, args) tuples in call order.
	- fail_* flags make the matching primitive raise RuntimeError.
	"""

	def __init__(self) -> None:
		self.focus: str = "editor"
		self.highlight: int = 0
		self.overlays: list[list[str]] = []
		self.live_overlay: Optional[int] = None
		self.icons: list[Any] = []
		self.handlers: dict[str, Callable[[], None]] = {}
		self.callback_calls: list[tuple[str, int, Any]] = []
		self.calls: list[tuple[str, tuple[Any, ...]]] = []

		self.on_callback: Optional[Callable[[str, int, Any], None]] = None

		self.fail_create = False
		self.fail_destroy = False
		self.fail_restore = False
		self.fail_install_on: Optional[str] = None

	# Focus -------------------------------------------------------------------

	def capture_focus(self) -> str:
		self.calls.append(("capture_focus", ()))
		return self.focus

	def restore_focus(self, ref: Any) -> None:
		self.calls.append(("restore_focus", (ref,)))
		if self.fail_restore:
			raise RuntimeError("restore failed")
		self.focus = ref

	# Overlay -----------------------------------------------------------------

	def create_overlay(self, lines: Sequence[str], icon: Any = None) -> int:
		self.calls.append(("create_overlay", (list(lines),)))
		self.focus = "overlay"
		if self.fail_create:
			raise RuntimeError("no room for a popup")
		self.overlays.append(list(lines))
		self.icons.append(icon)
		self.live_overlay = len(self.overlays) - 1
		self.highlight = 0
		return self.live_overlay

	def destroy_overlay(self, handle: Any) -> None:
		self.calls.append(("destroy_overlay", (handle,)))
		if self.fail_destroy:
			raise RuntimeError("destroy failed")
		if handle == self.live_overlay:
			self.live_overlay = None

	# Keys --------------------------------------------------------------------

	def install_key_handler(self, key: str, fn: Callable[[], None]) -> None:
		self.calls.append(("install_key_handler", (key,)))
		if key == self.fail_install_on:
			raise RuntimeError(f"cannot map {key}")
		self.handlers[key] = fn

	def remove_key_handler(self, key: str) -> None:
		self.calls.append(("remove_key_handler", (key,)))
		self.handlers.pop(key, None)

	def get_highlighted_index(self) -> int:
		return self.highlight

	def invoke_named_callback(self, name: str, index: int, item: Any) -> None:
		self.calls.append(("invoke_named_callback", (name, index, item)))
		self.callback_calls.append((name, index, item))
		if self.on_callback is not None:
			self.on_callback(name, index, item)

	# Test helpers ------------------------------------------------------------

	def press(self, key: str) -> bool:
		"""
		Deliver a key; True when a menu handler consumed it.
		"""
		handler = self.handlers.get(key)
		if handler is None:
			return False
		handler()
		return True

	def confirm(self) -> bool:
		return self.press(CONFIRM_KEY)

	def cancel(self) -> bool:
		return self.press(CANCEL_KEY)

	def call_names(self) -> list[str]:
		return [name for name, _ in self.calls]


@pytest.fixture
def host() -> FakeHost:
	return FakeHost()


class FakeClock:
	"""
	Manual clock for Telemetry spans (seconds).
	"""

	def __init__(self, now: float = 100.0) -> None:
		self.now = now

	def __call__(self) -> float:
		return self.now

	def advance(self, seconds: float) -> None:
		self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
	return FakeClock()


@pytest.fixture
def telemetry(clock: FakeClock) -> tuple[Telemetry, MemorySink]:
	sink = MemorySink()
	return Telemetry(enabled=True, sink=sink, clock=clock), sink


@pytest.fixture
def tk_root() -> Iterator[Any]:
	import tkinter as tk

	try:
		root = tk.Tk()
	except tk.TclError as ex:
		pytest.skip(f"Tk display not available: {ex}")

	root.withdraw()
	try:
		yield root
	finally:
		root.destroy()
