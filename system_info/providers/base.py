"""
Base interfaces for system data providers.
"""
import logging
import os
import subprocess
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..config import ReportConfig
from ..exceptions import ProbeUnavailable
from ..parsers.disk_parser import FilesystemInfo, MountEntry

logger = logging.getLogger(__name__)


class SystemDataProvider(ABC):
    """
    Abstract base class for system data providers.

    A provider is the probe layer for one platform family. It queries
    the operating system and returns raw data in the dictionary shapes
    the parsers understand, without doing any unit conversion itself.
    Any source that cannot be opened or queried raises ProbeUnavailable.

    OS identity and load average come from facilities every supported
    platform shares, so they are implemented here once.
    """

    # Short name used in logs
    platform_name = "generic"

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or ReportConfig()

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if this provider is available on the current system.

        Returns:
            True if the provider can be used, False otherwise.
        """
        pass

    @abstractmethod
    def get_cpu_data(self) -> Dict[str, Any]:
        """Raw CPU model and clock data."""
        pass

    @abstractmethod
    def get_uptime_data(self) -> Dict[str, Any]:
        """Raw uptime counter or boot timestamp."""
        pass

    @abstractmethod
    def get_memory_data(self) -> Dict[str, Any]:
        """Raw memory counters."""
        pass

    @abstractmethod
    def get_disk_data(self) -> Dict[str, Any]:
        """Raw mount table capacity data."""
        pass

    def get_os_identity(self) -> Sequence[str]:
        """Return the uname tuple (sysname, nodename, release, version, machine)."""
        try:
            return os.uname()
        except (OSError, AttributeError) as e:
            raise ProbeUnavailable("uname", str(e)) from e

    def get_load_average(self) -> float:
        """Return the 1-minute load average."""
        try:
            return os.getloadavg()[0]
        except (OSError, AttributeError) as e:
            raise ProbeUnavailable("getloadavg", str(e)) from e

    def read_text_file(self, path: str) -> str:
        """
        Read a whole text file.

        Raises:
            ProbeUnavailable: If the file cannot be opened or read.
        """
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            raise ProbeUnavailable(path, e.strerror or str(e)) from e

    def page_size(self) -> int:
        """System memory page size in bytes."""
        try:
            return os.sysconf("SC_PAGE_SIZE")
        except (OSError, ValueError, AttributeError) as e:
            raise ProbeUnavailable("pagesize", str(e)) from e

    def stat_mounts(self, entries: Iterable[MountEntry]) -> List[FilesystemInfo]:
        """
        Query filesystem statistics for each mount point.

        Mount points that cannot be queried (permissions, stale network
        mounts) are left out of the result.
        """
        filesystems = []
        for entry in entries:
            try:
                st = os.statvfs(entry.mount_point)
            except OSError as e:
                logger.debug("Skipping %s: %s", entry.mount_point, e)
                continue
            block_size = st.f_frsize or st.f_bsize
            filesystems.append(FilesystemInfo(
                device=entry.device,
                mount_point=entry.mount_point,
                total_bytes=st.f_blocks * block_size,
                free_bytes=st.f_bfree * block_size
            ))
        return filesystems


class CommandExecutionProvider(SystemDataProvider):
    """Base class for providers that query the kernel through system commands."""

    def execute_command(self, command: List[str], check: bool = True) -> str:
        """
        Execute a system command and return its output.

        Args:
            command: The command and its arguments.
            check: Whether a non-zero exit status is an error.

        Returns:
            The command's output as a string.

        Raises:
            ProbeUnavailable: If the command is missing, fails or times out.
        """
        source = " ".join(command)
        try:
            result = subprocess.run(
                command,
                check=check,
                capture_output=True,
                text=True,
                timeout=self.config.command_timeout
            )
        except FileNotFoundError as e:
            raise ProbeUnavailable(source, "command not found") from e
        except subprocess.CalledProcessError as e:
            raise ProbeUnavailable(source, f"exit status {e.returncode}") from e
        except subprocess.TimeoutExpired as e:
            raise ProbeUnavailable(source, "timed out") from e
        except OSError as e:
            raise ProbeUnavailable(source, str(e)) from e
        return result.stdout

    def sysctl(self, name: str) -> str:
        """Read one kernel parameter by name."""
        return self.execute_command(["sysctl", "-n", name]).strip()

    def optional_sysctl(self, name: Optional[str]) -> Optional[str]:
        """Read a kernel parameter that not every release provides."""
        if not name:
            return None
        try:
            return self.sysctl(name) or None
        except ProbeUnavailable as e:
            logger.debug("Optional sysctl unavailable: %s", e)
            return None
