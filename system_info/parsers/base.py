"""
Base interfaces for system data parsers.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, TypeVar

from ..exceptions import ProbeDataMissing

# Define a generic type for parsed data
T = TypeVar('T')


class DataParser(Generic[T], ABC):
    """
    Abstract base class for data parsers.

    Parsers convert the raw text and numbers gathered by a provider
    into typed samples. They never touch the operating system
    themselves, so they can be exercised with captured output.
    """

    # Name used in error messages
    source = "data"

    @abstractmethod
    def parse(self, raw_data: Dict[str, Any]) -> T:
        """
        Parse raw data into a structured format.

        Args:
            raw_data: Dictionary containing raw data from a provider.

        Returns:
            Structured data in the format defined by the parser implementation.

        Raises:
            ProbeDataMissing: If an expected field is absent from the raw data.
        """
        pass

    def missing(self, what: str) -> ProbeDataMissing:
        return ProbeDataMissing(self.source, f"{what} not found")


def split_key_value(line: str, sep: str = ":") -> tuple:
    """
    Split a "key: value" line at the first separator.

    Both halves are stripped, which also drops trailing newlines.
    Lines without the separator yield an empty value.
    """
    key, found, value = line.partition(sep)
    if not found:
        return line.strip(), ""
    return key.strip(), value.strip()


def parse_int(value: Any, source: str, what: str) -> int:
    """Parse a leading integer, tolerating a trailing '.' or unit suffix."""
    text = str(value).strip().rstrip(".")
    digits = text.split()[0] if text else ""
    try:
        return int(digits)
    except ValueError:
        try:
            return int(float(digits))
        except ValueError:
            raise ProbeDataMissing(source, f"{what} is not numeric: {value!r}") from None
