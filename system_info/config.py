"""
Configuration for report composition and platform data sources.
"""
import os
from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Optional, Tuple

from .base import DEFAULT_FIELD_LIMITS, DEFAULT_LINE_LIMIT, DEFAULT_SEPARATOR


@dataclass(frozen=True)
class ReportConfig:
    """Settings shared by the collector and the platform providers."""
    separator: str = DEFAULT_SEPARATOR
    line_limit: int = DEFAULT_LINE_LIMIT  # bytes
    field_limits: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_FIELD_LIMITS))

    proc_root: str = "/proc"
    mount_table: str = "/etc/mtab"
    mount_table_fallback: str = "/proc/mounts"
    solaris_mount_table: str = "/etc/mnttab"

    # Mounts whose device starts with one of these count toward disk usage
    # on platforms that filter the mount table.
    device_prefixes: Tuple[str, ...] = ("/dev/", "ROOT")

    command_timeout: float = 5.0

    def field_limit(self, name: str) -> int:
        return self.field_limits.get(name, DEFAULT_FIELD_LIMITS.get(name, 64))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReportConfig":
        """
        Build a configuration from SYSINFO_* environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        config = cls()
        overrides = {}

        if env.get("SYSINFO_PROC_ROOT"):
            overrides["proc_root"] = env["SYSINFO_PROC_ROOT"]
        if env.get("SYSINFO_MOUNT_TABLE"):
            overrides["mount_table"] = env["SYSINFO_MOUNT_TABLE"]
        if env.get("SYSINFO_LINE_LIMIT"):
            line_limit = int(env["SYSINFO_LINE_LIMIT"])
            if line_limit <= 0:
                raise ValueError(f"SYSINFO_LINE_LIMIT must be positive, got {line_limit}")
            overrides["line_limit"] = line_limit
        if env.get("SYSINFO_COMMAND_TIMEOUT"):
            overrides["command_timeout"] = float(env["SYSINFO_COMMAND_TIMEOUT"])
        if env.get("SYSINFO_DEVICE_PREFIXES"):
            prefixes = tuple(p.strip() for p in env["SYSINFO_DEVICE_PREFIXES"].split(",") if p.strip())
            if prefixes:
                overrides["device_prefixes"] = prefixes

        return replace(config, **overrides) if overrides else config
