# ---------------------------------------------------------------------------
# File: dispatcher.py
# ---------------------------------------------------------------------------
# Description:
#	InputDispatcher: transient key handlers for an open menu session.
#
# Notes:
#	- Binds "<Return>" (confirm), "<Escape>" (cancel) and every shortcut character.
#	- Everything else stays with the host (navigation is native popup behaviour).
#	- Exit order on every path:
#		1) remove handlers
#		2) close overlay (restores focus)
#		3) notify on_closed
#		4) fire the CallbackGate
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Treat out-of-range highlight as cancel
# 10/08/2026	Paul G. LeDuc				Roll back partially installed handlers
# 10/19/2026	Paul G. LeDuc				Handlers resolve their action through the KeyMap
# ---------------------------------------------------------------------------

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Optional

from pyactionmenu.core.logging import get_app_logger
from pyactionmenu.menu.errors import OverlayCreationError
from pyactionmenu.menu.gate import CANCEL_INDEX
from pyactionmenu.menu.host import CANCEL_KEY, CONFIRM_KEY, KeyHandler, MenuHost
from pyactionmenu.menu.keys import KeyMap, MenuAction
from pyactionmenu.menu.session import OverlaySession, Session


_log = get_app_logger("menu.dispatcher")


@dataclass(frozen=True, slots=True)
class MenuOutcome:
	"""
	What a session ended with. index is -1 and item None for a cancel.
	"""
	action: MenuAction
	index: int
	item: Any = None

	@property
	def cancelled(self) -> bool:
		return self.index == CANCEL_INDEX


ClosedHook = Callable[[Session, MenuOutcome, list[str]], None]


class InputDispatcher:
	"""
	InputDispatcher

	Translates host keystrokes into session outcomes for exactly one Session.
	"""

	def __init__(
		self,
		host: MenuHost,
		overlay: OverlaySession,
		*,
		on_closed: Optional[ClosedHook] = None,
	) -> None:
		self._host = host
		self._overlay = overlay
		self._on_closed = on_closed

		self._session: Optional[Session] = None
		self.keymap = KeyMap()

	@property
	def session(self) -> Optional[Session]:
		return self._session

	# -----------------------------------------------------------------------
	# Binding
	# -----------------------------------------------------------------------

	def install(self, session: Session) -> None:
		"""
		Install confirm/cancel/shortcut handlers for session.

		Raises:
			OverlayCreationError: the host refused a binding. Handlers installed
			so far are removed again before raising.
		"""
		self._session = session

		self.keymap.clear()
		self.keymap.bind(CONFIRM_KEY, MenuAction.CONFIRM)
		self.keymap.bind(CANCEL_KEY, MenuAction.CANCEL)
		for char in session.shortcut_index:
			self.keymap.bind(char, MenuAction.SHORTCUT)

		installed: list[str] = []
		try:
			for key in self.keymap.keys():
				self._host.install_key_handler(key, self._handler_for(key))
				installed.append(key)
		except Exception as ex:
			for key in installed:
				self._remove_handler(key)
			self.keymap.clear()
			self._session = None
			raise OverlayCreationError(f"Host could not bind menu key: {ex}") from ex

		_log.debug("Menu session %s bound keys: %s", session.id, self.keymap.keys())

	def uninstall(self) -> list[str]:
		"""
		Remove every handler this dispatcher installed. Returns failed keys.
		"""
		failed: list[str] = []
		for key in self.keymap.keys():
			if not self._remove_handler(key):
				failed.append(key)
		self.keymap.clear()
		return failed

	def _handler_for(self, key: str) -> KeyHandler:
		return functools.partial(self.dispatch, key)

	def _remove_handler(self, key: str) -> bool:
		try:
			self._host.remove_key_handler(key)
			return True
		except Exception:
			_log.exception("Removing menu key handler %r failed", key)
			return False

	# -----------------------------------------------------------------------
	# Actions
	# -----------------------------------------------------------------------

	def dispatch(self, key: str) -> None:
		"""
		Run the action bound to key. Keys without a binding are ignored.
		"""
		action = self.keymap.resolve(key)
		if action is None:
			_log.debug("Key %r has no menu binding", key)
			return

		if action is MenuAction.CONFIRM:
			self.confirm()
		elif action is MenuAction.CANCEL:
			self.cancel()
		else:
			self.shortcut(key)

	def confirm(self) -> None:
		"""
		Select whatever the host popup currently highlights.
		"""
		session = self._live_session()
		if session is None:
			return

		try:
			index = self._host.get_highlighted_index()
		except Exception:
			_log.exception("Menu session %s: reading highlighted index failed", session.id)
			index = CANCEL_INDEX

		item = session.item_at(index)
		if item is None:
			_log.debug("Menu session %s: nothing highlighted (%r); cancelling", session.id, index)
			self._finish(session, MenuOutcome(MenuAction.CANCEL, CANCEL_INDEX))
			return

		self._finish(session, MenuOutcome(MenuAction.CONFIRM, index, item.value))

	def cancel(self) -> None:
		session = self._live_session()
		if session is None:
			return
		self._finish(session, MenuOutcome(MenuAction.CANCEL, CANCEL_INDEX))

	def shortcut(self, char: str) -> None:
		"""
		Select the item bound to char, ignoring the current highlight.
		"""
		session = self._live_session()
		if session is None:
			return

		index = session.shortcut_index.lookup(char)
		if index is None:
			_log.debug("Menu session %s: %r is not a shortcut", session.id, char)
			return

		self._finish(session, MenuOutcome(MenuAction.SHORTCUT, index, session.items[index].value))

	# -----------------------------------------------------------------------
	# Internals
	# -----------------------------------------------------------------------

	def _live_session(self) -> Optional[Session]:
		session = self._session
		if session is None or session.closed:
			return None
		return session

	def _finish(self, session: Session, outcome: MenuOutcome) -> None:
		failed = [f"remove_key_handler:{key}" for key in self.uninstall()]
		failed.extend(self._overlay.close(session))
		self._session = None

		try:
			if self._on_closed is not None:
				self._on_closed(session, outcome, failed)
		finally:
			if outcome.cancelled:
				session.gate.fire_cancel()
			else:
				session.gate.fire(outcome.index, outcome.item)
