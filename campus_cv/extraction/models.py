from dataclasses import dataclass
from enum import Enum

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PLAIN_TEXT_MIME_TYPE = "text/plain"


class DocumentKind(Enum):
    """Extractor family resolved once from the declared MIME type."""

    PDF = "pdf"
    DOCX = "docx"
    PLAIN_TEXT = "plain_text"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_mime_type(cls, mime_type: str) -> "DocumentKind":
        normalized = mime_type.split(";", 1)[0].strip().lower()
        return _MIME_KINDS.get(normalized, cls.UNSUPPORTED)


_MIME_KINDS: dict[str, DocumentKind] = {
    PDF_MIME_TYPE: DocumentKind.PDF,
    DOCX_MIME_TYPE: DocumentKind.DOCX,
    PLAIN_TEXT_MIME_TYPE: DocumentKind.PLAIN_TEXT,
}


class ExtractionMethod(Enum):
    """Which strategy produced the accepted text."""

    PDF_BYTES = "pdf_bytes"
    PDF_OCR = "pdf_ocr"
    DOCX_RAW = "docx_raw"
    DOCX_MARKUP = "docx_markup"
    DOCX_BINARY = "docx_binary"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class RawDocument:
    """An uploaded file as received from the upload form."""

    content: bytes
    mime_type: str
    file_name: str

    @property
    def kind(self) -> DocumentKind:
        return DocumentKind.from_mime_type(self.mime_type)

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ExtractedText:
    """Normalized text plus the strategy it came from."""

    text: str
    method: ExtractionMethod
