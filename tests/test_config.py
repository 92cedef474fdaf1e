import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from pgpoint.app.config import get_settings, load_env_file, reset_settings_cache


class SettingsTests(unittest.TestCase):
    def setUp(self):
        reset_settings_cache()

    def tearDown(self):
        reset_settings_cache()

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            s = get_settings()
        self.assertFalse(s.nullpoint_strict)
        self.assertTrue(s.log_scan_failures)

    def test_cached(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertIs(get_settings(), get_settings())

    def test_env_flags(self):
        env = {"PGPOINT_NULLPOINT_STRICT": "yes", "PGPOINT_LOG_SCAN_FAILURES": "off"}
        with mock.patch.dict(os.environ, env, clear=True):
            s = get_settings()
        self.assertTrue(s.nullpoint_strict)
        self.assertFalse(s.log_scan_failures)

    def test_env_file_real_env_wins(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "pgpoint.env"
            path.write_text(
                "# ustawienia lokalne\n"
                "PGPOINT_NULLPOINT_STRICT=1\n"
                "PGPOINT_LOG_SCAN_FAILURES = 1\n"
                "garbage line\n",
                encoding="utf-8",
            )
            env = {"PGPOINT_ENV_FILE": str(path), "PGPOINT_LOG_SCAN_FAILURES": "0"}
            with mock.patch.dict(os.environ, env, clear=True):
                s = get_settings()

        self.assertTrue(s.nullpoint_strict)
        self.assertFalse(s.log_scan_failures)

    def test_missing_env_file(self):
        with self.assertRaises(FileNotFoundError):
            load_env_file(Path("/nonexistent/pgpoint.env"))


if __name__ == "__main__":
    unittest.main()
