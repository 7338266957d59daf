"""
Point-in-time system information reports.

This package collects CPU identity and speed, OS identification, uptime,
load average, memory usage and disk usage from platform-specific sources
(Linux, the BSDs, macOS, Solaris/illumos) and renders them as a single
summary line or as separate fields.
"""

from .base import Category, MetricReport
from .collector import SystemInfoCollector, compose_report
from .config import ReportConfig
from .exceptions import ProbeDataMissing, ProbeError, ProbeUnavailable
from .providers import SystemDataProvider, detect_provider

__all__ = [
    'Category',
    'MetricReport',
    'SystemInfoCollector',
    'compose_report',
    'ReportConfig',
    'ProbeError',
    'ProbeUnavailable',
    'ProbeDataMissing',
    'SystemDataProvider',
    'detect_provider',
]
