"""Selector state machine tests.

Drives ``SelectorController`` with key tokens the way the runtime loop does
and checks navigation, live filtering, create-new, and delete confirmation.
"""

from __future__ import annotations

import random
import tempfile
import unittest
from datetime import date, datetime, timedelta
from pathlib import Path

from lazytry.catalog import Entry
from lazytry.selector import (
    MODE_BROWSING,
    MODE_CONFIRMING_DELETE,
    SelectorController,
    SelectorResult,
)

NOW = datetime(2026, 10, 19, 9, 30, 0)
TODAY = date(2026, 10, 19)


def _entry(root: Path, name: str, touched_ago: timedelta = timedelta(hours=1)) -> Entry:
    return Entry(name=name, path=root / name, created=NOW - timedelta(days=2), touched=NOW - touched_ago)


def _type(selector: SelectorController, text: str) -> None:
    for ch in text:
        selector.handle_key(ch)


class SelectorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.entries = [
            _entry(self.root, "alpha", timedelta(minutes=5)),
            _entry(self.root, "beta", timedelta(hours=2)),
            _entry(self.root, "gamma", timedelta(days=3)),
        ]

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def make_selector(self, query: str = "", **kwargs) -> SelectorController:
        kwargs.setdefault("now", NOW)
        kwargs.setdefault("today", TODAY)
        return SelectorController(self.root, self.entries, query, **kwargs)


class BrowsingTests(SelectorTestCase):
    def test_starts_browsing_with_cursor_on_first_ranked_entry(self) -> None:
        selector = self.make_selector()

        self.assertEqual(selector.mode, MODE_BROWSING)
        self.assertEqual(selector.cursor, 0)
        self.assertEqual([s.name for s in selector.filtered], ["alpha", "beta", "gamma"])
        self.assertFalse(selector.done)

    def test_initial_query_prefilters(self) -> None:
        selector = self.make_selector("mm")

        self.assertEqual([s.name for s in selector.filtered], ["gamma"])

    def test_typing_refilters_and_clamps_cursor(self) -> None:
        selector = self.make_selector()
        for _ in range(3):
            selector.handle_key("DOWN")
        self.assertEqual(selector.cursor, 3)

        _type(selector, "al")

        self.assertEqual(selector.query, "al")
        self.assertEqual([s.name for s in selector.filtered], ["alpha"])
        self.assertEqual(selector.cursor, 1)

    def test_backspace_erases_and_refilters(self) -> None:
        selector = self.make_selector("bx")
        self.assertEqual(selector.filtered, [])

        selector.handle_key("BACKSPACE")

        self.assertEqual(selector.query, "b")
        self.assertEqual([s.name for s in selector.filtered], ["beta"])

    def test_backspace_on_empty_query_is_noop(self) -> None:
        selector = self.make_selector()
        selector.handle_key("DOWN")

        selector.handle_key("BACKSPACE")

        self.assertEqual(selector.query, "")
        self.assertEqual(selector.cursor, 1)
        self.assertEqual(len(selector.filtered), 3)

    def test_navigation_is_floored_and_capped_at_create_row(self) -> None:
        selector = self.make_selector()

        selector.handle_key("UP")
        self.assertEqual(selector.cursor, 0)
        for _ in range(10):
            selector.handle_key("CTRL_N")
        self.assertEqual(selector.cursor, 3)
        selector.handle_key("CTRL_P")
        self.assertEqual(selector.cursor, 2)

    def test_cursor_stays_in_range_for_random_event_sequences(self) -> None:
        rng = random.Random(1234)
        keys = ["UP", "DOWN", "CTRL_P", "CTRL_N", "a", "l", "x", "BACKSPACE"]
        selector = self.make_selector()

        for _ in range(500):
            selector.handle_key(rng.choice(keys))
            self.assertGreaterEqual(selector.cursor, 0)
            self.assertLessEqual(selector.cursor, len(selector.filtered))

    def test_control_characters_are_not_typed(self) -> None:
        selector = self.make_selector()

        for key in ("\x01", "\n", "\r", "TAB", "LEFT", "UNKNOWN"):
            selector.handle_key(key)

        self.assertEqual(selector.query, "")
        self.assertFalse(selector.done)


class SelectTests(SelectorTestCase):
    def test_enter_on_entry_selects_its_path(self) -> None:
        selector = self.make_selector()
        selector.handle_key("DOWN")

        finished = selector.handle_key("ENTER")

        self.assertTrue(finished)
        self.assertEqual(selector.result, SelectorResult(selected=self.root / "beta"))
        self.assertEqual(selector.result.kind, "selected")

    def test_enter_on_create_row_creates_dated_directory_from_query(self) -> None:
        selector = self.make_selector("my test")
        self.assertEqual(selector.filtered, [])

        selector.handle_key("ENTER")

        expected = self.root / "2026-10-19-my-test"
        self.assertEqual(selector.result.selected, expected)
        self.assertTrue(expected.is_dir())

    def test_create_disambiguates_against_existing_directories(self) -> None:
        (self.root / "2026-10-19-my-test").mkdir()
        (self.root / "2026-10-19-my-test-2").mkdir()
        selector = self.make_selector("my   test")

        selector.handle_key("ENTER")

        expected = self.root / "2026-10-19-my-test-3"
        self.assertEqual(selector.result.selected, expected)
        self.assertTrue(expected.is_dir())

    def test_create_with_empty_query_uses_default_name(self) -> None:
        selector = self.make_selector()
        for _ in range(3):
            selector.handle_key("DOWN")

        selector.handle_key("ENTER")

        self.assertEqual(selector.result.selected, self.root / "2026-10-19-new-try")

    def test_create_failure_still_reports_intended_path(self) -> None:
        def refuse(_path: Path) -> None:
            raise PermissionError("read-only")

        selector = self.make_selector("scratch", make_directory=refuse)

        with self.assertLogs("lazytry.selector.controller", level="WARNING") as logs:
            selector.handle_key("ENTER")

        self.assertEqual(selector.result.selected, self.root / "2026-10-19-scratch")
        self.assertIn("read-only", logs.output[0])

    def test_escape_cancels(self) -> None:
        selector = self.make_selector("al")

        self.assertTrue(selector.handle_key("ESC"))

        self.assertEqual(selector.result, SelectorResult(cancelled=True))
        self.assertEqual(selector.result.kind, "cancelled")

    def test_ctrl_c_cancels(self) -> None:
        selector = self.make_selector()

        selector.handle_key("CTRL_C")

        self.assertTrue(selector.result.cancelled)

    def test_keys_after_finish_are_ignored(self) -> None:
        selector = self.make_selector()
        selector.handle_key("ENTER")
        result = selector.result

        selector.handle_key("DOWN")
        selector.handle_key("ESC")

        self.assertIs(selector.result, result)
        self.assertEqual(selector.cursor, 0)


class DeleteConfirmationTests(SelectorTestCase):
    def _confirming(self) -> SelectorController:
        selector = self.make_selector()
        selector.handle_key("DOWN")
        selector.handle_key("CTRL_D")
        return selector

    def test_ctrl_d_enters_confirmation_for_entry_under_cursor(self) -> None:
        selector = self._confirming()

        self.assertEqual(selector.mode, MODE_CONFIRMING_DELETE)
        self.assertEqual(selector.delete_target, self.root / "beta")
        self.assertEqual(selector.confirm_buffer, "")

    def test_ctrl_d_on_create_row_is_noop(self) -> None:
        selector = self.make_selector("zzz")

        selector.handle_key("CTRL_D")

        self.assertEqual(selector.mode, MODE_BROWSING)
        self.assertIsNone(selector.delete_target)

    def test_wrong_confirmation_keeps_prompt_then_yes_deletes(self) -> None:
        selector = self._confirming()

        _type(selector, "NO")
        self.assertFalse(selector.handle_key("ENTER"))
        self.assertEqual(selector.mode, MODE_CONFIRMING_DELETE)
        self.assertEqual(selector.confirm_buffer, "NO")
        self.assertIsNone(selector.result)

        selector.handle_key("BACKSPACE")
        selector.handle_key("BACKSPACE")
        _type(selector, "YES")
        self.assertTrue(selector.handle_key("ENTER"))

        self.assertEqual(selector.result, SelectorResult(deleted=self.root / "beta"))

    def test_only_exact_yes_confirms(self) -> None:
        for attempt in ("yes", "YES ", "YESS", " YES", "Yes"):
            with self.subTest(attempt=attempt):
                selector = self._confirming()
                _type(selector, attempt)

                selector.handle_key("ENTER")

                self.assertIsNone(selector.result)
                self.assertEqual(selector.confirm_buffer, attempt)

    def test_escape_returns_to_browsing_with_query_and_cursor_intact(self) -> None:
        selector = self.make_selector("a")
        selector.handle_key("DOWN")
        cursor = selector.cursor
        selector.handle_key("CTRL_D")
        _type(selector, "YE")

        selector.handle_key("ESC")

        self.assertEqual(selector.mode, MODE_BROWSING)
        self.assertIsNone(selector.delete_target)
        self.assertEqual(selector.confirm_buffer, "")
        self.assertEqual(selector.query, "a")
        self.assertEqual(selector.cursor, cursor)
        self.assertIsNone(selector.result)

    def test_reentering_confirmation_starts_with_empty_buffer(self) -> None:
        selector = self._confirming()
        _type(selector, "YE")
        selector.handle_key("ESC")

        selector.handle_key("CTRL_D")

        self.assertEqual(selector.confirm_buffer, "")

    def test_confirmation_ignores_control_characters(self) -> None:
        selector = self._confirming()

        for key in ("Y", "\x01", "E", "TAB", "S"):
            selector.handle_key(key)

        self.assertEqual(selector.confirm_buffer, "YES")

    def test_navigation_keys_do_not_leak_into_browsing_while_confirming(self) -> None:
        selector = self._confirming()

        selector.handle_key("DOWN")
        selector.handle_key("UP")

        self.assertEqual(selector.cursor, 1)
        self.assertEqual(selector.confirm_buffer, "")


class SelectorResultTests(unittest.TestCase):
    def test_rejects_more_than_one_outcome(self) -> None:
        with self.assertRaises(ValueError):
            SelectorResult(selected=Path("/a"), cancelled=True)
        with self.assertRaises(ValueError):
            SelectorResult(selected=Path("/a"), deleted=Path("/b"))

    def test_kind_reports_outcome(self) -> None:
        self.assertEqual(SelectorResult(deleted=Path("/a")).kind, "deleted")


if __name__ == "__main__":
    unittest.main()
