from abc import ABC, abstractmethod

from campus_cv.structuring.models import ParsedCVData


class BaseStructurer(ABC):
    """Contract for all CV structuring adapters."""

    @abstractmethod
    def structure(self, text: str, file_name: str) -> ParsedCVData:
        """Turn extracted resume text into a fully populated CV record.

        Args:
            text: Normalized plain text from the extraction step.
            file_name: Original upload name, used as prompt context only.

        Returns:
            ParsedCVData where every field is present.

        Raises:
            AIResponseMalformedError: if the reply holds no JSON object.
            AIServiceUnavailableError: if the completion call fails.
        """
