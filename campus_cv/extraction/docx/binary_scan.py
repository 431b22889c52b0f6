import re

from campus_cv.extraction.base import BaseTextStrategy
from campus_cv.extraction.models import ExtractionMethod
from campus_cv.extraction.text_cleaning import clean_docx_text

_READABLE_RUN = re.compile(r"[A-Za-z0-9\s@._-]{4,}")
_LETTER = re.compile(r"[A-Za-z]")
_ARTIFACTS = ("Content-Type", "xml")


class DocxBinaryScanStrategy(BaseTextStrategy):
    """Last-resort scan of the raw bytes for readable runs."""

    method = ExtractionMethod.DOCX_BINARY

    def extract(self, content: bytes) -> str:
        decoded = content.decode("utf-8", errors="replace")
        runs = [
            run
            for run in _READABLE_RUN.findall(decoded)
            if len(run) > 3
            and _LETTER.search(run)
            and not any(artifact in run for artifact in _ARTIFACTS)
        ]
        return clean_docx_text(" ".join(runs))
