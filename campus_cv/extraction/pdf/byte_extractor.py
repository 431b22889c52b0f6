import re
from collections.abc import Sequence

from campus_cv.extraction.base import BaseTextStrategy
from campus_cv.extraction.exceptions import ExtractionInsufficientTextError
from campus_cv.extraction.models import ExtractionMethod
from campus_cv.extraction.pdf.base import BasePdfTextPass
from campus_cv.extraction.pdf.passes import DEFAULT_PASSES
from campus_cv.extraction.pdf.structure import (
    STRUCTURAL_KEYWORDS,
    strip_non_text_regions,
    strip_object_syntax,
)
from campus_cv.extraction.text_cleaning import normalize_pdf_text
from campus_cv.logging.logger import Log

_TOKEN = re.compile(r"[A-Za-z0-9@._-]+")
_LETTER = re.compile(r"[A-Za-z]")
_NUMERIC = re.compile(r"^[0-9.]+$")


class BytePdfExtractor(BaseTextStrategy):
    """Recovers PDF text by running regex passes over the raw bytes.

    Encoded streams and document metadata are blanked out first. Passes then
    run in order over the same buffer; their fragments are merged keeping the
    first occurrence of each trimmed value. When the merged text is still
    shorter than ``min_text_length`` a blunt token scan over whatever is left
    once names, dictionaries and structural keywords are gone replaces it.
    """

    method = ExtractionMethod.PDF_BYTES

    def __init__(
        self,
        *,
        min_text_length: int = 50,
        passes: Sequence[BasePdfTextPass] | None = None,
    ) -> None:
        self._min_text_length = min_text_length
        self._passes = list(passes) if passes is not None else [p() for p in DEFAULT_PASSES]

    def extract(self, content: bytes) -> str:
        decoded = strip_non_text_regions(content.decode("latin-1"))
        fragments = self.collect_fragments(decoded)
        text = " ".join(fragments)

        if len(text.strip()) < self._min_text_length:
            Log.warning(
                f"PDF passes yielded {len(text.strip())} chars, running aggressive token scan"
            )
            text = self._aggressive_scan(decoded)

        text = normalize_pdf_text(text)
        if len(text) < self._min_text_length:
            raise ExtractionInsufficientTextError(
                f"Could not extract sufficient text from PDF bytes ({len(text)} chars). "
                "The PDF may be image-based or use an unsupported font encoding."
            )
        Log.info(f"PDF byte extraction produced {len(text)} chars from {len(fragments)} fragments")
        return text

    def collect_fragments(self, decoded: str) -> list[str]:
        """Run every pass and merge fragments, deduplicated by trimmed value."""
        seen: set[str] = set()
        fragments: list[str] = []
        for text_pass in self._passes:
            try:
                found = text_pass.extract(decoded)
            except Exception as exc:
                Log.warning(f"PDF pass '{text_pass.name}' failed: {exc}")
                continue
            added = 0
            for fragment in found:
                key = fragment.strip()
                if not key or key in seen:
                    continue
                seen.add(key)
                fragments.append(fragment)
                added += 1
            Log.debug(f"PDF pass '{text_pass.name}' added {added} fragments")
        return fragments

    @staticmethod
    def _aggressive_scan(decoded: str) -> str:
        tokens = [
            token
            for token in _TOKEN.findall(strip_object_syntax(decoded))
            if len(token) > 2
            and _LETTER.search(token)
            and not _NUMERIC.match(token)
            and token not in STRUCTURAL_KEYWORDS
        ]
        return " ".join(tokens)
