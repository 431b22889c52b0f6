import io
import re
import zipfile

from bs4 import BeautifulSoup

from campus_cv.extraction.base import BaseTextStrategy
from campus_cv.extraction.exceptions import ExtractionInsufficientTextError
from campus_cv.extraction.models import ExtractionMethod
from campus_cv.extraction.text_cleaning import clean_docx_text

_BODY_PART = "word/document.xml"
_EXTRA_PARTS = re.compile(r"^word/(header\d*|footer\d*|footnotes|endnotes)\.xml$")


class DocxMarkupStrategy(BaseTextStrategy):
    """Strips WordprocessingML markup from the package parts with BeautifulSoup.

    Unlike the python-docx strategy this also reads headers, footers and
    notes, where resumes often keep contact details.
    """

    method = ExtractionMethod.DOCX_MARKUP

    def extract(self, content: bytes) -> str:
        try:
            with zipfile.ZipFile(io.BytesIO(content)) as archive:
                names = archive.namelist()
                parts = [_BODY_PART] if _BODY_PART in names else []
                parts.extend(sorted(n for n in names if _EXTRA_PARTS.match(n)))
                markup = [archive.read(name).decode("utf-8", errors="replace") for name in parts]
        except (zipfile.BadZipFile, OSError) as exc:
            raise ExtractionInsufficientTextError(
                f"DOCX package could not be read: {exc}"
            ) from exc

        return clean_docx_text("\n".join(self._markup_to_text(m) for m in markup))

    @staticmethod
    def _markup_to_text(markup: str) -> str:
        # html.parser keeps namespace prefixes and lowercases tag names
        soup = BeautifulSoup(markup, "html.parser")
        for node in soup.find_all(["w:instrtext", "w:deltext"]):
            node.decompose()
        for node in soup.find_all("w:tab"):
            node.replace_with(" ")
        for node in soup.find_all(["w:br", "w:cr"]):
            node.replace_with("\n")
        paragraphs = soup.find_all("w:p")
        if not paragraphs:
            return soup.get_text(separator=" ")
        return "\n".join(p.get_text() for p in paragraphs)
