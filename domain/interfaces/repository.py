"""Interfaces for the run's external collaborators."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import HistoryWindow, RunReport, Target


class ITargetRegistry(ABC):
    """Source of the ordered target list."""

    @abstractmethod
    def load(self) -> List[Target]:
        """Load targets in registry order. Raises TargetRegistryError."""
        pass


class IHistoryStore(ABC):
    """Persistence for the rolling history window."""

    @abstractmethod
    def load(self, max_days: int) -> HistoryWindow:
        """Load the window; absent or malformed data yields an empty window."""
        pass

    @abstractmethod
    def save(self, window: HistoryWindow) -> None:
        """Persist the post-append window."""
        pass


class IReportRenderer(ABC):
    """Turns a run report into a document."""

    @abstractmethod
    def render(self, report: RunReport) -> str:
        """Render the report document."""
        pass
