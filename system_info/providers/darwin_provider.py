"""
System data provider for macOS.
"""
from typing import Any, Dict

from .bsd_provider import BSDDataProvider


class DarwinDataProvider(BSDDataProvider):
    """
    Provides data on macOS.

    hw.cpufrequency is absent on Apple silicon, in which case the CPU
    field is reported without a clock.
    """

    platform_name = "darwin"
    system_name = "Darwin"

    model_key = "machdep.cpu.brand_string"
    clock_key = "hw.cpufrequency"
    clock_field = "clock_hz"

    def get_memory_data(self) -> Dict[str, Any]:
        return {
            "vm_stat_output": self.execute_command(["vm_stat"]),
            "total_bytes": self.sysctl("hw.memsize"),
        }
