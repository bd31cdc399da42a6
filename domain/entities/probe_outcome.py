"""Probe outcome entity: the result of checking one target once."""
from dataclasses import dataclass
from typing import Any, Optional

from ..enums import SearchStatus


@dataclass(frozen=True)
class ProbeOutcome:
    """Immutable result of one probe.

    Serialized as ``{api, success, searchStatus}``.
    """

    endpoint_url: str
    reachable: bool
    search_status: SearchStatus = SearchStatus.NOT_TESTED

    @classmethod
    def disabled(cls, endpoint_url: str) -> "ProbeOutcome":
        """Outcome substituted for administratively disabled targets."""
        return cls(endpoint_url=endpoint_url, reachable=False, search_status=SearchStatus.DISABLED)

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["ProbeOutcome"]:
        """Decode a stored outcome, returning None for unusable entries."""
        if not isinstance(raw, dict):
            return None
        api = raw.get("api")
        if not isinstance(api, str) or not api:
            return None
        return cls(
            endpoint_url=api,
            reachable=raw.get("success") is True,
            search_status=SearchStatus.parse(raw.get("searchStatus")),
        )

    def to_dict(self) -> dict:
        return {
            'api': self.endpoint_url,
            'success': self.reachable,
            'searchStatus': self.search_status.value,
        }
