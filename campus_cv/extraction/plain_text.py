from campus_cv.extraction.base import BaseTextStrategy
from campus_cv.extraction.models import ExtractionMethod


class PlainTextStrategy(BaseTextStrategy):
    """Reads text/plain uploads directly; no heuristics involved."""

    method = ExtractionMethod.PLAIN_TEXT

    def extract(self, content: bytes) -> str:
        return content.decode("utf-8-sig", errors="replace").strip()
