"""
Per-platform system data providers.
"""
import logging
from typing import List, Optional, Type

from ..config import ReportConfig
from .base import CommandExecutionProvider, SystemDataProvider
from .bsd_provider import (
    BSDDataProvider, DragonFlyDataProvider, FreeBSDDataProvider,
    NetBSDDataProvider, OpenBSDDataProvider,
)
from .darwin_provider import DarwinDataProvider
from .linux_provider import LinuxDataProvider
from .solaris_provider import SolarisDataProvider
from .unsupported_provider import UnsupportedPlatformProvider

logger = logging.getLogger(__name__)

# Checked in order; the first available provider wins
PROVIDER_CLASSES: List[Type[SystemDataProvider]] = [
    LinuxDataProvider,
    DarwinDataProvider,
    FreeBSDDataProvider,
    DragonFlyDataProvider,
    OpenBSDDataProvider,
    NetBSDDataProvider,
    SolarisDataProvider,
]


def detect_provider(config: Optional[ReportConfig] = None) -> SystemDataProvider:
    """Pick the provider for the running operating system."""
    for provider_class in PROVIDER_CLASSES:
        provider = provider_class(config)
        if provider.is_available():
            logger.debug("Using %s system data provider", provider.platform_name)
            return provider

    logger.debug("No system data provider for this platform, falling back")
    return UnsupportedPlatformProvider(config)


__all__ = [
    'SystemDataProvider',
    'CommandExecutionProvider',
    'BSDDataProvider',
    'DarwinDataProvider',
    'DragonFlyDataProvider',
    'FreeBSDDataProvider',
    'LinuxDataProvider',
    'NetBSDDataProvider',
    'OpenBSDDataProvider',
    'SolarisDataProvider',
    'UnsupportedPlatformProvider',
    'PROVIDER_CLASSES',
    'detect_provider',
]
