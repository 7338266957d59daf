from __future__ import annotations

import unittest

from system_info.config import ReportConfig


class ReportConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = ReportConfig()
        self.assertEqual(config.separator, " - ")
        self.assertEqual(config.line_limit, 512)
        self.assertEqual(config.field_limit("cpu"), 256)
        self.assertEqual(config.field_limit("os_identity"), 256)
        self.assertEqual(config.field_limit("uptime"), 64)
        self.assertEqual(config.device_prefixes, ("/dev/", "ROOT"))

    def test_empty_environment_keeps_defaults(self) -> None:
        self.assertEqual(ReportConfig.from_env({}), ReportConfig())

    def test_environment_overrides(self) -> None:
        config = ReportConfig.from_env({
            "SYSINFO_PROC_ROOT": "/tmp/proc",
            "SYSINFO_MOUNT_TABLE": "/proc/self/mounts",
            "SYSINFO_LINE_LIMIT": "256",
            "SYSINFO_COMMAND_TIMEOUT": "1.5",
            "SYSINFO_DEVICE_PREFIXES": "/dev/, zroot",
        })
        self.assertEqual(config.proc_root, "/tmp/proc")
        self.assertEqual(config.mount_table, "/proc/self/mounts")
        self.assertEqual(config.line_limit, 256)
        self.assertEqual(config.command_timeout, 1.5)
        self.assertEqual(config.device_prefixes, ("/dev/", "zroot"))

    def test_bad_numbers(self) -> None:
        with self.assertRaises(ValueError):
            ReportConfig.from_env({"SYSINFO_LINE_LIMIT": "lots"})
        with self.assertRaises(ValueError):
            ReportConfig.from_env({"SYSINFO_LINE_LIMIT": "0"})
        with self.assertRaises(ValueError):
            ReportConfig.from_env({"SYSINFO_COMMAND_TIMEOUT": "soon"})


if __name__ == "__main__":
    unittest.main()
