"""
Parser for disk data.
"""
import re
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Sequence

from .base import DataParser


class MountEntry(NamedTuple):
    """One line of a text mount table."""
    device: str
    mount_point: str
    fs_type: str = ""


class FilesystemInfo(NamedTuple):
    """Capacity of a single mounted filesystem in bytes."""
    device: str
    mount_point: str
    total_bytes: int
    free_bytes: int


class DiskSample(NamedTuple):
    """Aggregated capacity across the counted filesystems."""
    total_bytes: int
    used_bytes: int


_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


def _unescape(field: str) -> str:
    # mtab encodes spaces, tabs and backslashes as \040, \011, \134
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), field)


def parse_mount_table(text: str) -> List[MountEntry]:
    """
    Parse a text mount table (/etc/mtab, /proc/mounts or /etc/mnttab).

    Blank lines, comments and lines with fewer than two fields are skipped.
    """
    entries = []
    for line in text.splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        parts = line.split("\t") if "\t" in line else line.split()
        parts = [p.strip() for p in parts if p.strip()]
        if len(parts) < 2:
            continue
        entries.append(MountEntry(
            device=_unescape(parts[0]),
            mount_point=_unescape(parts[1]),
            fs_type=parts[2] if len(parts) > 2 else ""
        ))
    return entries


def is_real_device(device: str, prefixes: Sequence[str]) -> bool:
    """Check whether a mount's device name marks a real disk."""
    return any(device.startswith(prefix) for prefix in prefixes)


def aggregate_filesystems(filesystems: Iterable[FilesystemInfo],
                          device_prefixes: Optional[Sequence[str]] = None) -> DiskSample:
    """
    Sum capacity across filesystems.

    With device_prefixes set, only filesystems whose device starts with
    one of the prefixes are counted. Without it every filesystem counts.
    """
    total = 0
    free = 0
    for fs in filesystems:
        if device_prefixes is not None and not is_real_device(fs.device, device_prefixes):
            continue
        total += fs.total_bytes
        free += fs.free_bytes
    return DiskSample(total_bytes=total, used_bytes=total - free)


class DiskDataParser(DataParser[DiskSample]):
    """Parser for disk data from df output or per-mount statistics."""

    source = "disk"

    def parse(self, raw_data: Dict[str, Any]) -> DiskSample:
        """Parse raw disk data into a DiskSample."""
        prefixes = raw_data.get("device_prefixes")

        if "df_output" in raw_data:
            filesystems = self._parse_df_output(raw_data["df_output"])
        elif "filesystems" in raw_data:
            filesystems = list(raw_data["filesystems"])
        else:
            raise self.missing("mount table")

        sample = aggregate_filesystems(filesystems, prefixes)
        if sample.total_bytes <= 0:
            raise self.missing("non-zero disk capacity")
        if sample.used_bytes < 0:
            sample = DiskSample(sample.total_bytes, 0)
        return sample

    def _parse_df_output(self, df_output: str) -> List[FilesystemInfo]:
        """Parse filesystem information from POSIX df -k -P output."""
        filesystems = []

        lines = df_output.splitlines()
        if len(lines) <= 1:
            return filesystems  # No data or just header

        block_size = 1024
        header = re.search(r"(\d+)-blocks", lines[0])
        if header:
            block_size = int(header.group(1))

        for line in lines[1:]:
            parts = line.split()
            if len(parts) >= 6:
                try:
                    device = parts[0]
                    blocks = int(parts[1])
                    used = int(parts[2])
                    mount_point = " ".join(parts[5:])
                except ValueError:
                    # Skip invalid lines
                    continue

                filesystems.append(FilesystemInfo(
                    device=device,
                    mount_point=mount_point,
                    total_bytes=blocks * block_size,
                    free_bytes=(blocks - used) * block_size
                ))

        return filesystems
