"""
Parser for Solaris/illumos kstat -p output.
"""
from typing import Any, Dict

from .base import DataParser


class KstatDataParser(DataParser[Dict[str, str]]):
    """
    Parse parseable kstat output into a statistic-name to value mapping.

    Each line has the form "module:instance:name:statistic<TAB>value".
    When a statistic name appears more than once the first value wins.
    """

    source = "kstat"

    def parse(self, raw_data: Dict[str, Any]) -> Dict[str, str]:
        if "kstat_output" not in raw_data:
            raise self.missing("kstat output")

        stats: Dict[str, str] = {}
        for line in raw_data["kstat_output"].splitlines():
            if not line.strip():
                continue
            key, tab, value = line.partition("\t")
            if not tab:
                parts = line.split(None, 1)
                key, value = parts[0], parts[1] if len(parts) > 1 else ""
            statistic = key.strip().rsplit(":", 1)[-1]
            stats.setdefault(statistic, value.strip())
        return stats
