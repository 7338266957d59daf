"""
Parser for CPU identity data.
"""
from typing import Any, Dict, NamedTuple, Optional

from .base import DataParser, split_key_value


class CPUInfo(NamedTuple):
    """CPU model name and clock speed."""
    model: str
    mhz: Optional[float] = None  # None when the platform reports no clock


class CPUDataParser(DataParser[CPUInfo]):
    """Parser for CPU data from /proc/cpuinfo, sysctl or kstat."""

    source = "cpu"

    def parse(self, raw_data: Dict[str, Any]) -> CPUInfo:
        """Parse raw CPU data into a CPUInfo."""
        if "cpuinfo_output" in raw_data:
            return self._parse_cpuinfo(raw_data["cpuinfo_output"])

        model = (raw_data.get("model") or "").strip()
        if not model:
            raise self.missing("CPU model")

        mhz = None
        if raw_data.get("clock_hz") not in (None, ""):
            mhz = self._to_float(raw_data["clock_hz"], "clock_hz") / 1_000_000
        elif raw_data.get("clock_mhz") not in (None, ""):
            mhz = self._to_float(raw_data["clock_mhz"], "clock_mhz")

        return CPUInfo(model=model, mhz=mhz)

    def _parse_cpuinfo(self, cpuinfo_output: str) -> CPUInfo:
        """Parse /proc/cpuinfo; only the first core's entries are used."""
        model = None
        mhz = None

        for line in cpuinfo_output.splitlines():
            key, value = split_key_value(line)
            if key == "model name" and model is None:
                model = value
            elif key == "cpu MHz" and mhz is None:
                try:
                    mhz = float(value)
                except ValueError:
                    pass
            if model is not None and mhz is not None:
                break

        if not model:
            raise self.missing("model name")

        return CPUInfo(model=model, mhz=mhz)

    def _to_float(self, value: Any, what: str) -> float:
        try:
            return float(str(value).strip())
        except ValueError:
            raise self.missing(f"numeric {what}") from None
