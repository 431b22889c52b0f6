from abc import ABC, abstractmethod
from typing import ClassVar

from campus_cv.extraction.models import ExtractionMethod


class BaseTextStrategy(ABC):
    """Contract for every text extraction strategy in a fallback chain."""

    method: ClassVar[ExtractionMethod]

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract normalized text from raw file bytes.

        Args:
            content: Raw file content.

        Returns:
            Extracted text as a single normalized string.

        Raises:
            ExtractionInsufficientTextError: if the strategy could not produce
                usable text and the next strategy should be tried.
            ExtractionFailedError: if no further fallback makes sense.
        """
