# ---------------------------------------------------------------------------
# File: session.py
# ---------------------------------------------------------------------------
# Description:
#	OverlaySession: lifecycle of one open action menu.
#
# Notes:
#	- open() captures the editor focus and asks the host for an overlay.
#	- close() restores that focus, then destroys the overlay. Idempotent.
#	- close() never raises: each teardown step is attempted, failures are logged
#	  and returned so the caller can still deliver the outcome.
#	- An empty item list never reaches the host.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial coding / release
# 10/07/2026	Paul G. LeDuc				Restore focus when overlay creation fails
# 10/08/2026	Paul G. LeDuc				Return failed teardown steps from close()
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional
from uuid import uuid4

from pyactionmenu.core.logging import get_app_logger
from pyactionmenu.menu.errors import OverlayCreationError
from pyactionmenu.menu.gate import CallbackGate
from pyactionmenu.menu.host import MenuHost
from pyactionmenu.menu.items import MenuItem, display_lines
from pyactionmenu.menu.options import MenuConfig
from pyactionmenu.menu.shortcuts import ShortcutIndex


_log = get_app_logger("menu.session")


@dataclass(slots=True)
class Session:
	"""
	Session

	State owned by a single open menu. Discarded once closed.
	"""
	items: tuple[MenuItem, ...]
	shortcut_index: ShortcutIndex
	gate: CallbackGate
	origin_focus: Any = None
	overlay_handle: Any = None

	id: str = field(default_factory=lambda: uuid4().hex[:8])
	closed: bool = False

	@property
	def fired(self) -> bool:
		return self.gate.fired

	def item_at(self, index: int) -> Optional[MenuItem]:
		if 0 <= index < len(self.items):
			return self.items[index]
		return None

	def __repr__(self) -> str:
		return (
			f"<{self.__class__.__name__} id={self.id!r} items={len(self.items)} "
			f"closed={self.closed} fired={self.fired}>"
		)


class OverlaySession:
	"""
	OverlaySession

	Creates and tears down the host overlay for a Session.
	"""

	def __init__(self, host: MenuHost) -> None:
		self._host = host

	def open(self, config: MenuConfig) -> Optional[Session]:
		"""
		Open an overlay for config.items.

		Returns None (and touches nothing) when there are no items.

		Raises:
			OverlayCreationError: host failed to create the overlay.
		"""
		if not config.items:
			return None

		origin = self._host.capture_focus()
		lines = display_lines(config.items, config.icon)

		try:
			handle = self._host.create_overlay(lines, config.icon)
		except Exception as ex:
			self._restore_after_failed_open(origin)
			if isinstance(ex, OverlayCreationError):
				raise
			raise OverlayCreationError(f"Host could not create the menu overlay: {ex}") from ex

		session = Session(
			items=config.items,
			shortcut_index=ShortcutIndex.build(config.items),
			gate=CallbackGate(self._host, config.callback_name),
			origin_focus=origin,
			overlay_handle=handle,
		)
		_log.info("Opened menu session %s with %d item(s)", session.id, len(session.items))
		return session

	def close(self, session: Session) -> list[str]:
		"""
		Restore origin focus, then destroy the overlay.

		Returns the names of teardown steps that failed (empty on success).
		"""
		if session.closed:
			return []

		session.closed = True
		failed: list[str] = []

		try:
			self._host.restore_focus(session.origin_focus)
		except Exception:
			_log.exception("Menu session %s: restoring focus failed", session.id)
			failed.append("restore_focus")

		try:
			self._host.destroy_overlay(session.overlay_handle)
		except Exception:
			_log.exception("Menu session %s: destroying overlay failed", session.id)
			failed.append("destroy_overlay")

		session.overlay_handle = None
		_log.info("Closed menu session %s", session.id)
		return failed

	def _restore_after_failed_open(self, origin: Any) -> None:
		try:
			self._host.restore_focus(origin)
		except Exception:
			_log.exception("Restoring focus after failed overlay creation failed")
