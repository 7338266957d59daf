"""
Parser for memory data.
"""
import logging
import re
from typing import Any, Dict, NamedTuple

from .base import DataParser, parse_int, split_key_value

logger = logging.getLogger(__name__)


class MemorySample(NamedTuple):
    """Total and used physical memory in kilobytes."""
    total_kb: int
    used_kb: int


class MemoryDataParser(DataParser[MemorySample]):
    """Parser for memory data from various sources."""

    source = "memory"

    def parse(self, raw_data: Dict[str, Any]) -> MemorySample:
        """Parse raw memory data into a MemorySample."""
        if "meminfo_output" in raw_data:
            # Linux /proc/meminfo, already in KB
            total_kb, used_kb = self._parse_meminfo(raw_data["meminfo_output"])
        elif "vm_stat_output" in raw_data:
            # macOS vm_stat plus hw.memsize
            total_kb, used_kb = self._parse_vm_stat(
                raw_data["vm_stat_output"],
                raw_data.get("total_bytes")
            )
        elif "vmstat_summary_output" in raw_data:
            # NetBSD / OpenBSD vmstat -s
            total_kb, used_kb = self._parse_vmstat_summary(raw_data["vmstat_summary_output"])
        elif "page_size" in raw_data:
            # Pre-queried page counters (sysctl or kstat)
            total_kb, used_kb = self._parse_page_counts(raw_data)
        else:
            raise self.missing("memory source")

        return self._sample(total_kb, used_kb)

    def _sample(self, total_kb: int, used_kb: int) -> MemorySample:
        if total_kb <= 0:
            raise self.missing("non-zero total memory")
        if used_kb < 0:
            logger.debug("Clamping negative used memory %d KB to 0", used_kb)
            used_kb = 0
        elif used_kb > total_kb:
            logger.debug("Clamping used memory %d KB to total %d KB", used_kb, total_kb)
            used_kb = total_kb
        return MemorySample(total_kb=total_kb, used_kb=used_kb)

    def _parse_meminfo(self, meminfo_output: str) -> tuple:
        """Parse /proc/meminfo; used = total - free - buffers - cached."""
        values: Dict[str, int] = {}
        wanted = ("MemTotal", "MemFree", "Buffers", "Cached")

        for line in meminfo_output.splitlines():
            key, value = split_key_value(line)
            # Exact match so that SwapCached does not count as Cached
            if key in wanted and key not in values:
                values[key] = parse_int(value, self.source, key)

        if "MemTotal" not in values:
            raise self.missing("MemTotal")
        if "MemFree" not in values:
            raise self.missing("MemFree")

        total = values["MemTotal"]
        used = total - values["MemFree"] - values.get("Buffers", 0) - values.get("Cached", 0)
        return total, used

    def _parse_vm_stat(self, vm_stat_output: str, total_bytes: Any) -> tuple:
        """Parse vm_stat output (macOS)."""
        if total_bytes in (None, ""):
            raise self.missing("hw.memsize")

        page_size = 4096  # Default page size in bytes
        free_pages = None
        inactive_pages = 0

        for line in vm_stat_output.splitlines():
            if "page size of" in line:
                match = re.search(r"page size of (\d+) bytes", line)
                if match:
                    page_size = int(match.group(1))
                continue
            key, value = split_key_value(line)
            if key == "Pages free":
                free_pages = parse_int(value, self.source, key)
            elif key == "Pages inactive":
                inactive_pages = parse_int(value, self.source, key)

        if free_pages is None:
            raise self.missing("Pages free")

        total = parse_int(total_bytes, self.source, "hw.memsize")
        total_pages = total // page_size
        used = (total_pages - free_pages - inactive_pages) * page_size
        return total >> 10, used // 1024

    def _parse_vmstat_summary(self, output: str) -> tuple:
        """Parse vmstat -s output (NetBSD, OpenBSD)."""
        counters: Dict[str, int] = {}
        for line in output.splitlines():
            match = re.match(r"\s*(\d+)\s+(.+?)\s*$", line)
            if match:
                counters.setdefault(match.group(2), int(match.group(1)))

        page_size = counters.get("bytes per page")
        npages = counters.get("pages managed")
        free_pages = counters.get("pages free")
        if page_size is None:
            raise self.missing("bytes per page")
        if npages is None:
            raise self.missing("pages managed")
        if free_pages is None:
            raise self.missing("pages free")
        inactive_pages = counters.get("pages inactive", 0)

        total = npages * page_size
        used = (npages - free_pages - inactive_pages) * page_size
        return total >> 10, used // 1024

    def _parse_page_counts(self, raw_data: Dict[str, Any]) -> tuple:
        """
        Parse page counters queried one by one.

        Expects page_size plus either total_bytes or total_pages, and
        free_pages with optional inactive_pages and cache_pages.
        """
        page_size = parse_int(raw_data["page_size"], self.source, "page_size")

        if raw_data.get("total_bytes") not in (None, ""):
            total = parse_int(raw_data["total_bytes"], self.source, "total_bytes")
        elif raw_data.get("total_pages") not in (None, ""):
            total = parse_int(raw_data["total_pages"], self.source, "total_pages") * page_size
        else:
            raise self.missing("total memory")

        if raw_data.get("free_pages") in (None, ""):
            raise self.missing("free pages")

        unused_pages = sum(
            parse_int(raw_data[key], self.source, key)
            for key in ("free_pages", "inactive_pages", "cache_pages")
            if raw_data.get(key) not in (None, "")
        )
        used = total - unused_pages * page_size
        return total >> 10, used // 1024
