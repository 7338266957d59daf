"""
System data provider for Linux.
"""
import os
import platform
from typing import Any, Dict

from ..exceptions import ProbeUnavailable
from ..parsers.disk_parser import parse_mount_table
from .base import SystemDataProvider


class LinuxDataProvider(SystemDataProvider):
    """Reads the /proc pseudo-files and the text mount table."""

    platform_name = "linux"

    def is_available(self) -> bool:
        """Check if this provider can be used on the current system."""
        return platform.system() == "Linux"

    def _proc_path(self, name: str) -> str:
        return os.path.join(self.config.proc_root, name)

    def get_cpu_data(self) -> Dict[str, Any]:
        return {"cpuinfo_output": self.read_text_file(self._proc_path("cpuinfo"))}

    def get_uptime_data(self) -> Dict[str, Any]:
        return {"proc_uptime_output": self.read_text_file(self._proc_path("uptime"))}

    def get_memory_data(self) -> Dict[str, Any]:
        return {"meminfo_output": self.read_text_file(self._proc_path("meminfo"))}

    def get_disk_data(self) -> Dict[str, Any]:
        """
        Read the mount table and stat every mount point.

        Every mount line counts, virtual filesystems included.
        """
        try:
            text = self.read_text_file(self.config.mount_table)
        except ProbeUnavailable:
            if not self.config.mount_table_fallback:
                raise
            text = self.read_text_file(self.config.mount_table_fallback)

        entries = parse_mount_table(text)
        return {"filesystems": self.stat_mounts(entries)}
