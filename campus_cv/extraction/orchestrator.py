"""Routes an uploaded document to the fallback chain for its format."""

from collections.abc import Mapping

from campus_cv.extraction.chain import StrategyChain
from campus_cv.extraction.exceptions import FileTooLargeError, UnsupportedFileTypeError
from campus_cv.extraction.models import DocumentKind, ExtractedText, RawDocument
from campus_cv.logging.logger import Log

UNSUPPORTED_TYPE_MESSAGE = "Unsupported file type. Please upload PDF, DOCX, or TXT files."


class ExtractionOrchestrator:
    """Dispatches once on the document kind and runs that kind's chain.

    Produces exactly one of: ``ExtractedText``, ``ExtractionFailedError``
    (all strategies exhausted), or ``UnsupportedFileTypeError``.
    """

    def __init__(
        self,
        chains: Mapping[DocumentKind, StrategyChain],
        *,
        max_file_size_bytes: int | None = None,
    ) -> None:
        self._chains = dict(chains)
        self._max_file_size_bytes = max_file_size_bytes

    def chain_for(self, kind: DocumentKind) -> StrategyChain | None:
        return self._chains.get(kind)

    def extract(self, document: RawDocument) -> ExtractedText:
        kind = document.kind
        chain = self.chain_for(kind)
        if chain is None:
            raise UnsupportedFileTypeError(
                f"{UNSUPPORTED_TYPE_MESSAGE} Got '{document.mime_type}' for {document.file_name}."
            )
        if (
            self._max_file_size_bytes is not None
            and document.size_bytes > self._max_file_size_bytes
        ):
            limit_mb = self._max_file_size_bytes / (1024 * 1024)
            raise FileTooLargeError(
                f"{document.file_name} is {document.size_bytes} bytes; "
                f"please select a file smaller than {limit_mb:g}MB"
            )

        Log.info(
            f"Extracting text from {document.file_name} "
            f"({kind.value}, {document.size_bytes} bytes)"
        )
        result = chain.run(document.content)
        Log.info(f"Extracted {len(result.text)} chars via {result.method.value}")
        return result
