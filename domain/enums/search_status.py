"""Search capability status enumeration."""
from enum import Enum


class SearchStatus(Enum):
    """Result of the keyword search probe for one endpoint.

    Values are the strings stored in history documents, so existing
    reports stay readable across versions.
    """

    OK = "✅"
    NO_RESULTS = "无结果"
    FAILED = "❌"
    DISABLED = "禁用"
    NOT_TESTED = "-"

    @classmethod
    def parse(cls, value: object) -> "SearchStatus":
        """Decode a stored value, mapping anything unknown to FAILED."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if value == member.value or value == member.name:
                return member
        return cls.FAILED
