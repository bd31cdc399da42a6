"""Domain error hierarchy."""


class MonitorError(Exception):
    """Base class for monitor errors."""


class TargetRegistryError(MonitorError):
    """Target list is missing or cannot be decoded. Fatal for a run."""


class HistoryDecodeError(MonitorError):
    """Persisted history could not be decoded."""
