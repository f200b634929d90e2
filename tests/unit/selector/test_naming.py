from __future__ import annotations

import tempfile
import unittest
from datetime import date
from pathlib import Path

from lazytry.selector.naming import DEFAULT_TRY_NAME, dated_name, sanitize_name, unique_path


class NamingTests(unittest.TestCase):
    def test_sanitize_collapses_whitespace_runs(self) -> None:
        self.assertEqual(sanitize_name("  my   big\ttest "), "my-big-test")
        self.assertEqual(sanitize_name("already-fine"), "already-fine")
        self.assertEqual(sanitize_name("   "), "")

    def test_dated_name_prefixes_iso_date(self) -> None:
        self.assertEqual(dated_name("my test", date(2026, 10, 19)), "2026-10-19-my-test")

    def test_dated_name_falls_back_to_default(self) -> None:
        self.assertEqual(dated_name("  ", date(2026, 1, 2)), f"2026-01-02-{DEFAULT_TRY_NAME}")

    def test_unique_path_returns_free_path_unchanged(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "2026-10-19-demo"
            self.assertEqual(unique_path(path), path)

    def test_unique_path_counts_up_from_two(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "2026-10-19-demo").mkdir()
            self.assertEqual(unique_path(root / "2026-10-19-demo"), root / "2026-10-19-demo-2")

            (root / "2026-10-19-demo-2").mkdir()
            (root / "2026-10-19-demo-3").touch()
            self.assertEqual(unique_path(root / "2026-10-19-demo"), root / "2026-10-19-demo-4")


if __name__ == "__main__":
    unittest.main()
