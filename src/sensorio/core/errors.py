"""
Error types raised at the data boundaries of the editor.

Mutations on the in-memory tree never raise for stale addresses; only
loading, fetching and exporting can fail in ways a user needs to see.
"""


class SensorDatabaseError(Exception):
    """Base class for all sensor database errors."""


class DatasetParseError(SensorDatabaseError):
    """Raised when delimited text cannot be mapped to flat records."""


class DatasetFetchError(SensorDatabaseError):
    """Raised when the default dataset cannot be retrieved."""


class DatasetExportError(SensorDatabaseError):
    """Raised when the flattened dataset cannot be written."""
