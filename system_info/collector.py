"""
Main module for collecting system information reports.
"""
import logging
from typing import Callable, Dict, List, Optional, Union

from . import formatting
from .base import FIELD_NAMES, Category, MetricReport, categories_for
from .config import ReportConfig
from .exceptions import ProbeError
from .parsers.cpu_parser import CPUDataParser
from .parsers.disk_parser import DiskDataParser
from .parsers.memory_parser import MemoryDataParser
from .parsers.uptime_parser import UptimeDataParser
from .providers import SystemDataProvider, detect_provider

logger = logging.getLogger(__name__)

CategoryArg = Union[Category, str, None]


class SystemInfoCollector:
    """
    Runs the probes for a requested category and composes the report.

    The provider is picked once, when the collector is created. Nothing
    is cached between calls: every collect() queries the system afresh
    and returns a new MetricReport.
    """

    def __init__(self, provider: Optional[SystemDataProvider] = None,
                 config: Optional[ReportConfig] = None):
        self.config = config or (provider.config if provider else ReportConfig())
        self._provider = provider or detect_provider(self.config)

        self._cpu_parser = CPUDataParser()
        self._uptime_parser = UptimeDataParser()
        self._memory_parser = MemoryDataParser()
        self._disk_parser = DiskDataParser()

        self._probes: Dict[Category, Callable[[], str]] = {
            Category.OS_IDENTITY: self._probe_os_identity,
            Category.CPU: self._probe_cpu,
            Category.UPTIME: self._probe_uptime,
            Category.LOAD_AVERAGE: self._probe_load_average,
            Category.MEMORY: self._probe_memory,
            Category.DISK: self._probe_disk,
        }

    @property
    def provider(self) -> SystemDataProvider:
        return self._provider

    def _probe_os_identity(self) -> str:
        return formatting.format_os_identity(self._provider.get_os_identity())

    def _probe_cpu(self) -> str:
        return formatting.format_cpu(self._cpu_parser.parse(self._provider.get_cpu_data()))

    def _probe_uptime(self) -> str:
        return formatting.format_uptime(self._uptime_parser.parse(self._provider.get_uptime_data()))

    def _probe_load_average(self) -> str:
        return formatting.format_load_average(self._provider.get_load_average())

    def _probe_memory(self) -> str:
        return formatting.format_memory(self._memory_parser.parse(self._provider.get_memory_data()))

    def _probe_disk(self) -> str:
        return formatting.format_disk(self._disk_parser.parse(self._provider.get_disk_data()))

    def _resolve(self, category: CategoryArg) -> Optional[Category]:
        if isinstance(category, Category):
            return category
        return Category.from_token(category)

    def collect(self, category: CategoryArg = Category.ALL) -> MetricReport:
        """
        Collect the fields for a category.

        Args:
            category: A Category or a command token such as "mem" or "os".

        Returns:
            A new MetricReport. Unrecognized tokens and failed probes
            leave their fields empty.
        """
        report = MetricReport()
        resolved = self._resolve(category)
        if resolved is None:
            logger.debug("Unrecognized category %r", category)
            return report

        for item in categories_for(resolved):
            try:
                value = self._probes[item]()
            except ProbeError as e:
                logger.debug("%s probe failed: %s", item.value, e)
                continue
            name = FIELD_NAMES[item]
            report.set(item, formatting.truncate_bytes(value, self.config.field_limit(name)))

        return report

    def collect_fields(self, category: CategoryArg = Category.ALL) -> List[str]:
        """Populated fields for a category, in report order."""
        return self.collect(category).ordered_fields()

    def render(self, report: MetricReport) -> str:
        """
        Join a report's fields into one line bounded by the line limit.

        A field that does not fit is cut short; once no part of a field
        fits, the remaining fields are dropped.
        """
        limit = self.config.line_limit
        separator = self.config.separator
        line = ""
        used = 0

        for value in report.ordered_fields():
            if line:
                # Room for the separator and at least one byte of the field
                if used + len(separator.encode("utf-8")) >= limit:
                    break
                line += separator
                used = len(line.encode("utf-8"))
            piece = formatting.truncate_bytes(value, limit - used)
            if not piece:
                line = line[:-len(separator)] if line.endswith(separator) else line
                break
            line += piece
            used = len(line.encode("utf-8"))
            if used >= limit:
                break

        return line

    def compose_report(self, category: CategoryArg = Category.ALL) -> str:
        """Collect a category and render it as a single line."""
        return self.render(self.collect(category))


def compose_report(category: CategoryArg = Category.ALL,
                   config: Optional[ReportConfig] = None) -> str:
    """Compose a report line using the provider for the running platform."""
    return SystemInfoCollector(config=config).compose_report(category)
