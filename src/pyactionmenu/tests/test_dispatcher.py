# ---------------------------------------------------------------------------
# File: test_dispatcher.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for InputDispatcher (confirm/cancel/shortcut handlers).
#
# Notes:
#	- Pure unit tests; uses FakeHost from conftest.
#	- Ordering assertions read FakeHost.calls.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial tests
# 10/08/2026	Paul G. LeDuc				Cover install rollback
# 10/19/2026	Paul G. LeDuc				Key routing through KeyMap.resolve
# ---------------------------------------------------------------------------

from __future__ import annotations

import pytest

from pyactionmenu.menu.dispatcher import InputDispatcher, MenuOutcome
from pyactionmenu.menu.errors import OverlayCreationError
from pyactionmenu.menu.host import CANCEL_KEY, CONFIRM_KEY
from pyactionmenu.menu.keys import MenuAction
from pyactionmenu.menu.options import MenuConfig
from pyactionmenu.menu.session import OverlaySession


SHORTCUT_ITEMS = [
	{"word": "First", "shortcut": "f"},
	{"word": "Second", "shortcut": "s"},
	{"word": "Third", "shortcut": "t"},
]


def _open(host, items, callback="cb"):
	overlay = OverlaySession(host)
	session = overlay.open(MenuConfig.build(items, callback))
	closed: list[MenuOutcome] = []
	dispatcher = InputDispatcher(host, overlay, on_closed=lambda s, outcome, failed: closed.append(outcome))
	dispatcher.install(session)
	return dispatcher, session, closed


def test_install_binds_confirm_cancel_and_shortcuts(host):
	dispatcher, _, _ = _open(host, SHORTCUT_ITEMS)

	assert set(host.handlers) == {CONFIRM_KEY, CANCEL_KEY, "f", "s", "t"}
	assert dispatcher.keymap.resolve("s") is MenuAction.SHORTCUT
	assert dispatcher.keymap.resolve(CONFIRM_KEY) is MenuAction.CONFIRM


def test_plain_items_bind_only_confirm_and_cancel(host):
	_open(host, ["One", "Two"])

	assert set(host.handlers) == {CONFIRM_KEY, CANCEL_KEY}


def test_confirm_uses_host_highlight(host):
	_, session, closed = _open(host, ["One", "Two", "Three"])
	host.highlight = 2

	host.confirm()

	assert host.callback_calls == [("cb", 2, "Three")]
	assert closed == [MenuOutcome(MenuAction.CONFIRM, 2, "Three")]
	assert session.fired is True


def test_cancel_reports_minus_one(host):
	_open(host, ["One", "Two", "Three"])

	host.cancel()

	assert host.callback_calls == [("cb", -1, None)]


def test_shortcut_ignores_highlight(host):
	_, _, closed = _open(host, SHORTCUT_ITEMS)
	host.highlight = 0

	host.press("s")

	assert host.callback_calls == [("cb", 1, SHORTCUT_ITEMS[1])]
	assert closed[0].action is MenuAction.SHORTCUT


def test_unbound_key_is_not_intercepted(host):
	_, session, _ = _open(host, SHORTCUT_ITEMS)

	assert host.press("x") is False
	assert host.callback_calls == []
	assert session.closed is False


def test_out_of_range_highlight_is_a_cancel(host):
	_open(host, ["One"])
	host.highlight = -1

	host.confirm()

	assert host.callback_calls == [("cb", -1, None)]


def test_failing_highlight_query_is_a_cancel(host):
	_open(host, ["One"])

	def broken() -> int:
		raise RuntimeError("popup gone")

	host.get_highlighted_index = broken

	host.confirm()

	assert host.callback_calls == [("cb", -1, None)]


def test_exit_order_is_unbind_close_then_callback(host):
	_open(host, ["One"])
	host.calls.clear()

	host.confirm()

	names = host.call_names()
	assert names[-1] == "invoke_named_callback"
	assert names.index("restore_focus") < names.index("destroy_overlay") < names.index("invoke_named_callback")
	assert max(i for i, n in enumerate(names) if n == "remove_key_handler") < names.index("restore_focus")


def test_callback_sees_pre_menu_state(host):
	_open(host, ["One"])
	seen: dict[str, object] = {}

	def observe(name, index, item):
		seen["focus"] = host.focus
		seen["overlay"] = host.live_overlay
		seen["handlers"] = dict(host.handlers)

	host.on_callback = observe

	host.confirm()

	assert seen == {"focus": "editor", "overlay": None, "handlers": {}}


def test_stale_handler_cannot_fire_twice(host):
	dispatcher, _, _ = _open(host, SHORTCUT_ITEMS)
	confirm = host.handlers[CONFIRM_KEY]
	cancel = host.handlers[CANCEL_KEY]

	host.press("t")
	confirm()
	cancel()
	dispatcher.shortcut("f")

	assert host.callback_calls == [("cb", 2, SHORTCUT_ITEMS[2])]


def test_teardown_failure_still_delivers(host):
	_, _, _ = _open(host, ["One"])
	host.fail_destroy = True
	host.fail_restore = True

	host.confirm()

	assert host.callback_calls == [("cb", 0, "One")]


def test_failed_teardown_steps_reach_on_closed(host):
	overlay = OverlaySession(host)
	session = overlay.open(MenuConfig.build(["One"], "cb"))
	reports: list[list[str]] = []
	dispatcher = InputDispatcher(host, overlay, on_closed=lambda s, o, failed: reports.append(failed))
	dispatcher.install(session)
	host.fail_destroy = True

	host.cancel()

	assert reports == [["destroy_overlay"]]


def test_raising_on_closed_hook_still_delivers(host):
	overlay = OverlaySession(host)
	session = overlay.open(MenuConfig.build(["One"], "cb"))

	def hook(s, o, failed):
		raise RuntimeError("telemetry down")

	dispatcher = InputDispatcher(host, overlay, on_closed=hook)
	dispatcher.install(session)

	with pytest.raises(RuntimeError):
		host.confirm()

	assert host.callback_calls == [("cb", 0, "One")]


def test_install_failure_rolls_back_bindings(host):
	host.fail_install_on = "s"
	overlay = OverlaySession(host)
	session = overlay.open(MenuConfig.build(SHORTCUT_ITEMS, "cb"))
	dispatcher = InputDispatcher(host, overlay)

	with pytest.raises(OverlayCreationError):
		dispatcher.install(session)

	assert host.handlers == {}
	assert dispatcher.session is None
	assert dispatcher.keymap.keys() == []


def test_dispatch_runs_bound_action(host):
	dispatcher, _, _ = _open(host, SHORTCUT_ITEMS)

	dispatcher.dispatch("x")
	assert host.callback_calls == []

	dispatcher.dispatch("s")
	assert host.callback_calls == [("cb", 1, SHORTCUT_ITEMS[1])]


def test_installed_handlers_follow_keymap(host):
	dispatcher, _, _ = _open(host, ["One", "Two"])
	handler = host.handlers[CANCEL_KEY]

	dispatcher.keymap.clear()
	handler()

	assert host.callback_calls == []

	dispatcher.keymap.bind(CANCEL_KEY, MenuAction.CONFIRM)
	handler()

	assert host.callback_calls == [("cb", 0, "One")]
