# ---------------------------------------------------------------------------
# File: test_shortcuts.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ShortcutIndex.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/06/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyactionmenu.menu.items import normalize
from pyactionmenu.menu.shortcuts import ShortcutIndex


def test_maps_characters_to_indexes():
	items = normalize([
		{"word": "First", "shortcut": "f"},
		{"word": "Second"},
		{"word": "Third", "shortcut": "t"},
	])

	idx = ShortcutIndex.build(items)

	assert dict(idx) == {"f": 0, "t": 2}
	assert "s" not in idx
	assert idx.lookup("s") is None
	assert len(idx) == 2


def test_first_claim_wins():
	items = normalize([
		{"word": "A", "shortcut": "x"},
		{"word": "B", "shortcut": "x"},
		{"word": "C", "shortcut": "y"},
	])

	idx = ShortcutIndex.build(items)

	assert idx["x"] == 0
	assert idx["y"] == 2


def test_plain_strings_have_no_shortcuts():
	idx = ShortcutIndex.build(normalize(["One", "Two"]))

	assert len(idx) == 0
	assert list(idx) == []


def test_shortcuts_are_case_sensitive():
	idx = ShortcutIndex.build(normalize([{"word": "a", "shortcut": "a"}, {"word": "A", "shortcut": "A"}]))

	assert idx["a"] == 0
	assert idx["A"] == 1
