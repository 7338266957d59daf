"""
System data providers for the BSD family.

All of them read kernel parameters through sysctl and sum disk usage
from df output restricted to real devices. They differ in the names
of the CPU keys and in how memory counters are exposed.
"""
import platform
import time
from typing import Any, Dict, Optional

from .base import CommandExecutionProvider


class BSDDataProvider(CommandExecutionProvider):
    """Common sysctl-based provider; subclasses set the key names."""

    platform_name = "bsd"
    system_name: Optional[str] = None

    model_key = "hw.model"
    clock_key: Optional[str] = None
    # "clock_mhz" or "clock_hz", depending on what clock_key reports
    clock_field = "clock_mhz"

    def is_available(self) -> bool:
        """Check if this provider can be used on the current system."""
        return self.system_name is not None and platform.system() == self.system_name

    def get_cpu_data(self) -> Dict[str, Any]:
        return {
            "model": self.sysctl(self.model_key),
            self.clock_field: self.optional_sysctl(self.clock_key),
        }

    def get_uptime_data(self) -> Dict[str, Any]:
        return {
            "boot_time": self.sysctl("kern.boottime"),
            "now": int(time.time()),
        }

    def get_memory_data(self) -> Dict[str, Any]:
        return {"vmstat_summary_output": self.execute_command(["vmstat", "-s"])}

    def get_disk_data(self) -> Dict[str, Any]:
        # df exits non-zero when a single mount is unreadable; keep the rest
        output = self.execute_command(["df", "-k", "-P"], check=False)
        return {
            "df_output": output,
            "device_prefixes": self.config.device_prefixes,
        }


class FreeBSDDataProvider(BSDDataProvider):
    """FreeBSD: clock in MHz, memory from vm.stats page counters."""

    platform_name = "freebsd"
    system_name = "FreeBSD"

    clock_key = "hw.clockrate"
    total_memory_key = "hw.realmem"

    def get_memory_data(self) -> Dict[str, Any]:
        return {
            "total_bytes": self.sysctl(self.total_memory_key),
            "free_pages": self.sysctl("vm.stats.vm.v_free_count"),
            "inactive_pages": self.sysctl("vm.stats.vm.v_inactive_count"),
            # Removed in FreeBSD 12
            "cache_pages": self.optional_sysctl("vm.stats.vm.v_cache_count"),
            "page_size": self.page_size(),
        }


class DragonFlyDataProvider(FreeBSDDataProvider):
    """DragonFly BSD: clock from the TSC frequency in Hz."""

    platform_name = "dragonfly"
    system_name = "DragonFly"

    clock_key = "hw.tsc_frequency"
    clock_field = "clock_hz"
    total_memory_key = "hw.physmem"


class OpenBSDDataProvider(BSDDataProvider):
    """OpenBSD: clock in MHz, memory from vmstat -s."""

    platform_name = "openbsd"
    system_name = "OpenBSD"

    clock_key = "hw.cpuspeed"


class NetBSDDataProvider(BSDDataProvider):
    """NetBSD: brand string only, no clock key."""

    platform_name = "netbsd"
    system_name = "NetBSD"

    model_key = "machdep.cpu_brand"
