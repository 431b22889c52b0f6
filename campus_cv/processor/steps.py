from campus_cv.extraction.orchestrator import ExtractionOrchestrator
from campus_cv.logging.logger import Log
from campus_cv.processor.pipeline import PipelineContext, PipelineStep
from campus_cv.structuring.base import BaseStructurer


class ExtractTextStep(PipelineStep):
    def __init__(self, orchestrator: ExtractionOrchestrator) -> None:
        self._orchestrator = orchestrator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted = self._orchestrator.extract(context.document)
        Log.info(
            f"Extracted {len(context.extracted.text)} chars from "
            f"{context.document.file_name} via {context.extracted.method.value}"
        )
        return context


class StructureStep(PipelineStep):
    def __init__(self, structurer: BaseStructurer) -> None:
        self._structurer = structurer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.extracted is None:
            raise ValueError("PipelineContext.extracted must be set before structuring")
        context.parsed = self._structurer.structure(
            context.extracted.text, context.document.file_name
        )
        return context
