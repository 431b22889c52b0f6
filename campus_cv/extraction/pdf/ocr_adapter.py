import io

import pymupdf
import pytesseract  # type: ignore[import-untyped]
from PIL import Image

from campus_cv.extraction.base import BaseTextStrategy
from campus_cv.extraction.exceptions import ExtractionFailedError
from campus_cv.extraction.models import ExtractionMethod
from campus_cv.extraction.text_cleaning import normalize_ocr_text
from campus_cv.logging.logger import Log

OCR_FAILURE_ADVICE = (
    "Please upload a DOCX or TXT file, or ensure your PDF contains selectable text."
)


class TesseractOcrAdapter(BaseTextStrategy):
    """Rasterizes PDF pages with PyMuPDF and recognizes them with Tesseract.

    Last resort for PDFs: every failure is terminal.
    """

    method = ExtractionMethod.PDF_OCR

    def __init__(
        self,
        *,
        language: str = "eng",
        dpi: int = 200,
        min_text_length: int = 50,
    ) -> None:
        self._language = language
        self._dpi = dpi
        self._min_text_length = min_text_length

    def extract(self, content: bytes) -> str:
        Log.info(f"Starting OCR extraction (lang={self._language}, dpi={self._dpi})")
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [self._recognize_page(page) for page in doc]
        except Exception as exc:
            raise ExtractionFailedError(
                f"OCR extraction failed: {exc}. {OCR_FAILURE_ADVICE}"
            ) from exc

        text = normalize_ocr_text("\n".join(pages))
        if len(text) < self._min_text_length:
            raise ExtractionFailedError(
                "OCR could not extract sufficient text from PDF "
                f"({len(text)} chars). {OCR_FAILURE_ADVICE}"
            )
        Log.info(f"OCR extraction produced {len(text)} chars from {len(pages)} pages")
        return text

    def _recognize_page(self, page: pymupdf.Page) -> str:
        pixmap = page.get_pixmap(dpi=self._dpi)
        image = Image.open(io.BytesIO(pixmap.tobytes("png")))
        return str(pytesseract.image_to_string(image, lang=self._language))
