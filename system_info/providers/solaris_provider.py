"""
System data provider for Solaris and illumos.
"""
import platform
import time
from typing import Any, Dict, List

from ..exceptions import ProbeDataMissing
from ..parsers.disk_parser import parse_mount_table
from ..parsers.kstat_parser import KstatDataParser
from .base import CommandExecutionProvider


class SolarisDataProvider(CommandExecutionProvider):
    """Queries the kernel statistics framework through kstat -p."""

    platform_name = "solaris"

    def __init__(self, config=None):
        super().__init__(config)
        self._kstat_parser = KstatDataParser()

    def is_available(self) -> bool:
        """Check if this provider can be used on the current system."""
        return platform.system() == "SunOS"

    def kstat(self, *names: str) -> Dict[str, str]:
        """Look up named kstat statistics, keyed by statistic name."""
        output = self.execute_command(["kstat", "-p", *names])
        return self._kstat_parser.parse({"kstat_output": output})

    def _require(self, stats: Dict[str, str], names: List[str], source: str) -> None:
        for name in names:
            if not stats.get(name):
                raise ProbeDataMissing(source, f"{name} not found")

    def get_cpu_data(self) -> Dict[str, Any]:
        stats = self.kstat("cpu_info:0:cpu_info0:brand", "cpu_info:0:cpu_info0:current_clock_Hz")
        self._require(stats, ["brand"], "cpu_info0")
        return {
            "model": stats["brand"],
            "clock_hz": stats.get("current_clock_Hz"),
        }

    def get_uptime_data(self) -> Dict[str, Any]:
        stats = self.kstat("unix:0:system_misc:boot_time")
        self._require(stats, ["boot_time"], "system_misc")
        return {
            "boot_time": stats["boot_time"],
            "now": int(time.time()),
        }

    def get_memory_data(self) -> Dict[str, Any]:
        stats = self.kstat("unix:0:system_pages:physmem", "unix:0:system_pages:availrmem")
        self._require(stats, ["physmem", "availrmem"], "system_pages")
        return {
            "total_pages": stats["physmem"],
            "free_pages": stats["availrmem"],
            "page_size": self.page_size(),
        }

    def get_disk_data(self) -> Dict[str, Any]:
        entries = parse_mount_table(self.read_text_file(self.config.solaris_mount_table))
        return {"filesystems": self.stat_mounts(entries)}
