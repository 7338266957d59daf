"""
Formatting of normalized metric samples into report fields.

Each format_* function takes a sample already converted by a parser
and returns the text for one report field. Unit conversion happens
here: megahertz to gigahertz, kilobytes to megabytes, bytes to
gigabytes, and seconds to weeks/days/hours/minutes.
"""
import os
from typing import NamedTuple, Optional, Tuple

from .parsers.cpu_parser import CPUInfo
from .parsers.disk_parser import DiskSample
from .parsers.memory_parser import MemorySample

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_WEEK = 604800

BYTES_PER_GB = 1 << 30


class UptimeDuration(NamedTuple):
    """Elapsed time since boot broken down by unit."""
    weeks: int
    days: int
    hours: int
    minutes: int

    @classmethod
    def from_seconds(cls, total: int) -> "UptimeDuration":
        total = max(0, int(total))
        return cls(
            weeks=total // SECONDS_PER_WEEK,
            days=(total // SECONDS_PER_DAY) % 7,
            hours=(total // SECONDS_PER_HOUR) % 24,
            minutes=(total // SECONDS_PER_MINUTE) % 60,
        )


def truncate_bytes(text: str, limit: int) -> str:
    """
    Truncate text so its UTF-8 encoding fits in limit bytes.

    Never splits a multi-byte character.
    """
    if limit <= 0:
        return ""
    encoded = text.encode("utf-8")
    if len(encoded) <= limit:
        return text
    return encoded[:limit].decode("utf-8", errors="ignore")


def mhz_to_ghz(mhz: float) -> float:
    return mhz / 1000


def kb_to_mb(kb: float) -> float:
    return kb / 1024


def bytes_to_gb(value: float) -> float:
    return value / BYTES_PER_GB


def format_cpu(info: CPUInfo) -> str:
    """Format as "CPU: <model> (<ghz> GHz)", or without the clock if unknown."""
    if info.mhz is None:
        return f"CPU: {info.model}"
    return f"CPU: {info.model} ({mhz_to_ghz(info.mhz):.2f} GHz)"


def format_os_identity(uname: Optional[Tuple] = None) -> str:
    """Format as "OS: <sysname> <release>/<machine>"."""
    if uname is None:
        uname = os.uname()
    sysname, _, release, _, machine = tuple(uname)[:5]
    return f"OS: {sysname} {release}/{machine}"


def format_uptime(seconds: int) -> str:
    """
    Format as "Uptime:" followed by non-zero units, e.g. "Uptime: 2d 3h 4m".

    Seconds are never shown.
    """
    duration = UptimeDuration.from_seconds(seconds)
    parts = ["Uptime:"]
    for value, unit in zip(duration, "wdhm"):
        if value:
            parts.append(f"{value}{unit}")
    return " ".join(parts)


def format_load_average(load_1min: float) -> str:
    return f"Load Average: {load_1min:.2f}"


def format_memory(sample: MemorySample) -> str:
    """Format as "Memory Usage: <used>MB/<total>MB (<pct>%)"."""
    used_mb = kb_to_mb(sample.used_kb)
    total_mb = kb_to_mb(sample.total_kb)
    percent = sample.used_kb / sample.total_kb * 100
    return f"Memory Usage: {used_mb:.2f}MB/{total_mb:.2f}MB ({percent:.2f}%)"


def format_disk(sample: DiskSample) -> str:
    """Format as "Disk Usage: <used>GB/<total>GB"."""
    return f"Disk Usage: {bytes_to_gb(sample.used_bytes):.2f}GB/{bytes_to_gb(sample.total_bytes):.2f}GB"
