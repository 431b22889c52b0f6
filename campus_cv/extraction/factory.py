from campus_cv.config.settings import Settings
from campus_cv.extraction.chain import ChainLink, StrategyChain
from campus_cv.extraction.docx.binary_scan import DocxBinaryScanStrategy
from campus_cv.extraction.docx.markup import DocxMarkupStrategy
from campus_cv.extraction.docx.raw_text import DocxRawTextStrategy
from campus_cv.extraction.models import DocumentKind
from campus_cv.extraction.orchestrator import ExtractionOrchestrator
from campus_cv.extraction.pdf.byte_extractor import BytePdfExtractor
from campus_cv.extraction.pdf.ocr_adapter import OCR_FAILURE_ADVICE, TesseractOcrAdapter
from campus_cv.extraction.plain_text import PlainTextStrategy

PDF_FAILURE_MESSAGE = f"Failed to extract text from PDF. {OCR_FAILURE_ADVICE}"
DOCX_FAILURE_MESSAGE = (
    "Could not extract readable text from DOCX. The file may be corrupted, "
    "password-protected, or contain only images."
)


class ExtractionOrchestratorFactory:
    """Builds the per-format fallback chains from settings."""

    @classmethod
    def create(cls, settings: Settings) -> ExtractionOrchestrator:
        threshold = settings.min_text_length
        chains = {
            DocumentKind.PDF: cls._pdf_chain(settings),
            DocumentKind.DOCX: StrategyChain(
                [
                    ChainLink(DocxRawTextStrategy(), settings.docx_raw_accept_length),
                    ChainLink(DocxMarkupStrategy(), threshold),
                    ChainLink(DocxBinaryScanStrategy(), threshold),
                ],
                min_text_length=threshold,
                failure_message=DOCX_FAILURE_MESSAGE,
            ),
            DocumentKind.PLAIN_TEXT: StrategyChain(
                [ChainLink(PlainTextStrategy(), 0)],
                min_text_length=0,
                failure_message="Could not read text file.",
            ),
        }
        return ExtractionOrchestrator(
            chains, max_file_size_bytes=settings.max_file_size_bytes
        )

    @classmethod
    def _pdf_chain(cls, settings: Settings) -> StrategyChain:
        threshold = settings.min_text_length
        links = [ChainLink(BytePdfExtractor(min_text_length=threshold), threshold)]
        if settings.ocr_enabled:
            links.append(
                ChainLink(
                    TesseractOcrAdapter(
                        language=settings.ocr_language,
                        dpi=settings.ocr_dpi,
                        min_text_length=threshold,
                    ),
                    threshold,
                )
            )
        return StrategyChain(
            links, min_text_length=threshold, failure_message=PDF_FAILURE_MESSAGE
        )
