from abc import ABC, abstractmethod
from typing import ClassVar


class BasePdfTextPass(ABC):
    """One independent heuristic over the Latin-1 decoded PDF buffer."""

    name: ClassVar[str]

    @abstractmethod
    def extract(self, content: str) -> list[str]:
        """Return candidate text fragments in document order.

        Fragments may repeat or overlap with other passes; deduplication is
        the caller's job.
        """
