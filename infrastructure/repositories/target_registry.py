"""Target registry backed by the KVideo JSON config file."""
import json
import logging
from pathlib import Path
from typing import List

from domain.entities import Target
from domain.errors import TargetRegistryError
from domain.interfaces import ITargetRegistry

logger = logging.getLogger(__name__)


class JsonTargetRegistry(ITargetRegistry):
    """Reads ``[{name, baseUrl, id?, enabled?}, ...]`` from a JSON file."""

    def __init__(self, path: Path):
        """
        Initialize registry.

        Args:
            path: Location of the target config file
        """
        self.path = Path(path)

    def load(self) -> List[Target]:
        """
        Load targets in file order.

        Raises:
            TargetRegistryError: file missing, not JSON, not a list, or an
                entry lacks ``name``/``baseUrl``
        """
        if not self.path.exists():
            raise TargetRegistryError(f"target config not found: {self.path}")
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise TargetRegistryError(f"cannot read target config {self.path}: {e}") from e
        if not isinstance(raw, list):
            raise TargetRegistryError(f"target config {self.path} must be a JSON array")

        targets: List[Target] = []
        for index, entry in enumerate(raw):
            if not isinstance(entry, dict):
                raise TargetRegistryError(f"entry #{index} is not an object")
            try:
                targets.append(Target.from_config(entry))
            except ValueError as e:
                raise TargetRegistryError(f"entry #{index}: {e}") from e

        seen = set()
        for t in targets:
            if t.endpoint_url in seen:
                logger.warning(f"Duplicate endpoint {t.endpoint_url} ({t.name}) shares history with an earlier entry")
            seen.add(t.endpoint_url)

        logger.info(f"Loaded {len(targets)} targets from {self.path}")
        return targets
