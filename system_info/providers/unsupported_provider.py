"""
Fallback provider for platforms without a dedicated implementation.
"""
import platform
from typing import Any, Dict, NoReturn

from ..exceptions import ProbeUnavailable
from .base import SystemDataProvider


class UnsupportedPlatformProvider(SystemDataProvider):
    """Only OS identity and load average work; every other probe is unavailable."""

    platform_name = "unsupported"

    def is_available(self) -> bool:
        return True

    def _unavailable(self, what: str) -> NoReturn:
        raise ProbeUnavailable(what, f"not supported on {platform.system() or 'this platform'}")

    def get_cpu_data(self) -> Dict[str, Any]:
        self._unavailable("cpu")

    def get_uptime_data(self) -> Dict[str, Any]:
        self._unavailable("uptime")

    def get_memory_data(self) -> Dict[str, Any]:
        self._unavailable("memory")

    def get_disk_data(self) -> Dict[str, Any]:
        self._unavailable("disk")
