"""
Parsers turning raw platform output into typed samples.
"""
from .base import DataParser
from .cpu_parser import CPUDataParser, CPUInfo
from .disk_parser import (
    DiskDataParser, DiskSample, FilesystemInfo, MountEntry,
    aggregate_filesystems, parse_mount_table,
)
from .kstat_parser import KstatDataParser
from .memory_parser import MemoryDataParser, MemorySample
from .uptime_parser import UptimeDataParser

__all__ = [
    'DataParser',
    'CPUDataParser',
    'CPUInfo',
    'DiskDataParser',
    'DiskSample',
    'FilesystemInfo',
    'MountEntry',
    'aggregate_filesystems',
    'parse_mount_table',
    'KstatDataParser',
    'MemoryDataParser',
    'MemorySample',
    'UptimeDataParser',
]
