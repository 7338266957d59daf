"""
Exceptions raised by platform probes.
"""


class ProbeError(Exception):
    """Base class for all probe failures."""

    def __init__(self, source: str, reason: str = ""):
        self.source = source
        self.reason = reason
        message = f"{source}: {reason}" if reason else source
        super().__init__(message)


class ProbeUnavailable(ProbeError):
    """The data source could not be opened or queried."""


class ProbeDataMissing(ProbeError):
    """The data source was read but an expected field was not found."""
