"""
Parser for uptime data.
"""
import re
import time
from typing import Any, Dict

from .base import DataParser


class UptimeDataParser(DataParser[int]):
    """
    Parser producing whole seconds elapsed since boot.

    Accepts either a direct counter (/proc/uptime) or a boot timestamp
    (sysctl kern.boottime, kstat boot_time) together with the current
    wall-clock time under "now".
    """

    source = "uptime"

    def parse(self, raw_data: Dict[str, Any]) -> int:
        if "proc_uptime_output" in raw_data:
            return self._parse_proc_uptime(raw_data["proc_uptime_output"])

        if "boot_time" in raw_data:
            boot_time = self._parse_boot_time(raw_data["boot_time"])
            now = int(raw_data.get("now", time.time()))
            return max(0, now - boot_time)

        raise self.missing("uptime source")

    def _parse_proc_uptime(self, output: str) -> int:
        """First field of /proc/uptime is seconds since boot."""
        parts = output.split()
        if not parts:
            raise self.missing("uptime counter")
        try:
            return max(0, int(float(parts[0])))
        except ValueError:
            raise self.missing("numeric uptime counter") from None

    def _parse_boot_time(self, value: Any) -> int:
        """
        Parse a boot timestamp.

        Handles a plain epoch ("1697600000"), the FreeBSD/macOS struct form
        ("{ sec = 1697600000, usec = 0 } Wed Oct 18 ...") and the NetBSD
        date form ("Wed Oct 18 10:00:00 2023", local time).
        """
        if isinstance(value, (int, float)):
            return int(value)

        text = str(value).strip()
        match = re.search(r"\bsec\s*=\s*(\d+)", text)
        if match:
            return int(match.group(1))
        if re.fullmatch(r"\d+(\.\d+)?", text):
            return int(float(text))
        try:
            return int(time.mktime(time.strptime(text, "%a %b %d %H:%M:%S %Y")))
        except ValueError:
            raise self.missing("boot time") from None
