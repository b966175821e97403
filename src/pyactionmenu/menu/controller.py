# ---------------------------------------------------------------------------
# File: controller.py
# ---------------------------------------------------------------------------
# Description:
#	MenuController: public entry point for opening an action menu.
#
# Notes:
#	- Owns the single "active session" reference (no module globals).
#	- open() returns immediately; the outcome arrives later through exactly one
#	  host.invoke_named_callback(name, index, item).
#	- The active session is cleared before the callback runs, so a callback
#	  may open the next menu.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Reject re-entrant open()
# 10/09/2026	Paul G. LeDuc				Add menu telemetry
# 10/19/2026	Paul G. LeDuc				Empty open() is a no-op even while open; session span
# ---------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Iterable, Optional

from pyactionmenu.core.logging import get_app_logger
from pyactionmenu.core.telemetry import Telemetry, get_telemetry
from pyactionmenu.menu.dispatcher import InputDispatcher, MenuOutcome
from pyactionmenu.menu.errors import ReentrantOpenError
from pyactionmenu.menu.host import MenuHost
from pyactionmenu.menu.items import RawItem
from pyactionmenu.menu.options import MenuConfig
from pyactionmenu.menu.session import OverlaySession, Session


_log = get_app_logger("menu")


class MenuState(str, Enum):
	CLOSED = "closed"
	OPEN = "open"


class MenuController:
	"""
	MenuController

	Closed --open(items)--> Open --confirm/shortcut/cancel--> Closed
	"""

	def __init__(self, host: MenuHost, *, telemetry: Optional[Telemetry] = None) -> None:
		self._host = host
		self._overlay = OverlaySession(host)
		self._telemetry = telemetry

		self._active: Optional[Session] = None
		self._opened_at = 0.0
		self._dispatcher: Optional[InputDispatcher] = None

	@property
	def telemetry(self) -> Telemetry:
		return self._telemetry if self._telemetry is not None else get_telemetry()

	@property
	def state(self) -> MenuState:
		return MenuState.OPEN if self._active is not None else MenuState.CLOSED

	@property
	def active(self) -> Optional[Session]:
		return self._active

	@property
	def dispatcher(self) -> Optional[InputDispatcher]:
		return self._dispatcher

	def open(
		self,
		items: Iterable[RawItem],
		callback_name: str,
		options: Mapping[str, Any] | None = None,
	) -> None:
		"""
		Open an action menu over items.

		An empty item list is a no-op in every state: no host call, no callback,
		no callback-name or options check, and no re-entrancy error.

		Raises:
			ReentrantOpenError: a menu is already open.
			InvalidItemError: an item is malformed.
			MenuConfigError: callback name or options are malformed.
			OverlayCreationError: the host could not show the menu.
		"""
		config = MenuConfig.build(items, callback_name, options)
		if not config.items:
			_log.debug("open() with no items for %r: nothing to show", callback_name)
			self.telemetry.counter("menu.noop_open", attrs={"callback": callback_name})
			return

		if self._active is not None:
			raise ReentrantOpenError(
				f"Menu session {self._active.id} is still open; close it before opening another"
			)

		session = self._overlay.open(config)
		if session is None:
			return

		dispatcher = InputDispatcher(self._host, self._overlay, on_closed=self._on_session_closed)
		try:
			dispatcher.install(session)
		except Exception:
			self._overlay.close(session)
			raise

		self._active = session
		self._dispatcher = dispatcher
		self._opened_at = self.telemetry.start()

		self.telemetry.event(
			"menu.opened",
			{"session_id": session.id, "items": len(session.items), "callback": callback_name},
		)

	def _on_session_closed(self, session: Session, outcome: MenuOutcome, failed: list[str]) -> None:
		if self._active is session:
			self._active = None
			self._dispatcher = None

		for step in failed:
			self.telemetry.counter("menu.teardown_failed", attrs={"session_id": session.id, "step": step})

		self.telemetry.span_ms("menu.session_ms", self._opened_at, {"session_id": session.id})

		self.telemetry.event(
			"menu.closed",
			{"session_id": session.id, "outcome": outcome.action.value, "index": outcome.index},
		)

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} state={self.state.value!r} active={self._active!r}>"
