from collections.abc import Sequence

from campus_cv.config.settings import Settings
from campus_cv.extraction.factory import ExtractionOrchestratorFactory
from campus_cv.extraction.models import RawDocument
from campus_cv.logging.logger import Log
from campus_cv.processor.pipeline import PipelineContext, PipelineStep
from campus_cv.processor.steps import ExtractTextStep, StructureStep
from campus_cv.structuring.factory import StructurerFactory
from campus_cv.structuring.models import ParsedCVData


class CVProcessor:
    """Runs one upload through the pipeline steps.

    Pipeline: extract text -> structure with AI. Any step error propagates
    unchanged; no partially populated record is ever returned.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, document: RawDocument) -> ParsedCVData:
        Log.info(f"Processing {document.file_name} ({document.mime_type})")
        context = PipelineContext(document=document)
        for step in self._steps:
            context = step.run(context)
        if context.parsed is None:
            raise ValueError("Pipeline finished without a parsed CV record")
        Log.info(f"Finished processing {document.file_name}")
        return context.parsed


def build_processor(settings: Settings) -> CVProcessor:
    """Build a CVProcessor with the configured extractors and AI client."""
    orchestrator = ExtractionOrchestratorFactory.create(settings)
    structurer = StructurerFactory.create(settings)
    return CVProcessor(
        steps=[
            ExtractTextStep(orchestrator),
            StructureStep(structurer),
        ]
    )
