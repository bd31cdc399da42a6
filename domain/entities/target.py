"""Target entity representing one monitored endpoint."""
from dataclasses import dataclass
from typing import Any, Mapping

MISSING_ID = "-"


@dataclass(frozen=True)
class Target:
    """A video-source API endpoint plus its registry metadata.

    Identity is ``endpoint_url``; two targets with the same URL share
    history for aggregation.
    """

    name: str
    endpoint_url: str
    reference_id: str = MISSING_ID
    disabled: bool = False

    @classmethod
    def from_config(cls, raw: Mapping[str, Any]) -> "Target":
        """Build from a registry entry ``{name, baseUrl, id?, enabled?}``.

        Raises ValueError when ``name`` or ``baseUrl`` is missing.
        """
        name = raw.get("name")
        base_url = raw.get("baseUrl")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"entry has no name: {dict(raw)!r}")
        if not isinstance(base_url, str) or not base_url.strip():
            raise ValueError(f"entry {name!r} has no baseUrl")
        ref = raw.get("id")
        return cls(
            name=name,
            endpoint_url=base_url.strip(),
            reference_id=str(ref) if ref not in (None, "") else MISSING_ID,
            # Only an explicit false disables a target.
            disabled=raw.get("enabled") is False,
        )

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'api': self.endpoint_url,
            'id': self.reference_id,
            'disabled': self.disabled,
        }
