from abc import ABC, abstractmethod
from dataclasses import dataclass

from campus_cv.extraction.models import ExtractedText, RawDocument
from campus_cv.structuring.models import ParsedCVData


@dataclass(slots=True)
class PipelineContext:
    document: RawDocument
    extracted: ExtractedText | None = None
    parsed: ParsedCVData | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
