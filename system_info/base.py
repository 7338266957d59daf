"""
Core types shared by the probes, the formatter and the collector.
"""
from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Category(Enum):
    """Metric categories a caller can request."""
    ALL = "all"
    CPU = "cpu"
    OS_IDENTITY = "os"
    UPTIME = "uptime"
    LOAD_AVERAGE = "load"
    MEMORY = "mem"
    DISK = "disk"

    @classmethod
    def from_token(cls, token: Optional[str]) -> Optional["Category"]:
        """
        Resolve a command-line token to a category.

        Tokens are case-sensitive. A missing or empty token means ALL;
        an unrecognized token returns None.
        """
        if not token:
            return cls.ALL
        return CATEGORY_TOKENS.get(token)


# Accepted tokens, including the "uname" alias for the OS identity.
CATEGORY_TOKENS: Dict[str, Category] = {
    "all": Category.ALL,
    "cpu": Category.CPU,
    "mem": Category.MEMORY,
    "disk": Category.DISK,
    "uptime": Category.UPTIME,
    "load": Category.LOAD_AVERAGE,
    "uname": Category.OS_IDENTITY,
    "os": Category.OS_IDENTITY,
}

# Order in which fields appear in a full report.
REPORT_ORDER: Tuple[Category, ...] = (
    Category.OS_IDENTITY,
    Category.CPU,
    Category.UPTIME,
    Category.LOAD_AVERAGE,
    Category.MEMORY,
    Category.DISK,
)

# MetricReport attribute holding each category's field.
FIELD_NAMES: Dict[Category, str] = {
    Category.CPU: "cpu",
    Category.OS_IDENTITY: "os_identity",
    Category.UPTIME: "uptime",
    Category.LOAD_AVERAGE: "load_average",
    Category.MEMORY: "memory",
    Category.DISK: "disk",
}

DEFAULT_SEPARATOR = " - "
DEFAULT_LINE_LIMIT = 512

DEFAULT_FIELD_LIMITS: Dict[str, int] = {
    "cpu": 256,
    "os_identity": 256,
    "uptime": 64,
    "load_average": 64,
    "memory": 64,
    "disk": 64,
}


def categories_for(category: Category) -> Tuple[Category, ...]:
    """Expand a requested category into the ordered categories to probe."""
    if category is Category.ALL:
        return REPORT_ORDER
    return (category,)


@dataclass
class MetricReport:
    """
    One snapshot of formatted metric fields.

    A field is None when its probe was not requested or failed.
    """
    cpu: Optional[str] = None
    os_identity: Optional[str] = None
    uptime: Optional[str] = None
    load_average: Optional[str] = None
    memory: Optional[str] = None
    disk: Optional[str] = None

    def get(self, category: Category) -> Optional[str]:
        return getattr(self, FIELD_NAMES[category])

    def set(self, category: Category, value: Optional[str]) -> None:
        setattr(self, FIELD_NAMES[category], value)

    def ordered_fields(self) -> List[str]:
        """Populated fields in report order."""
        values = (self.get(category) for category in REPORT_ORDER)
        return [value for value in values if value]

    def is_empty(self) -> bool:
        return not any(getattr(self, f.name) for f in fields(self))
