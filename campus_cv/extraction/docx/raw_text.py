import io

import docx

from campus_cv.extraction.base import BaseTextStrategy
from campus_cv.extraction.exceptions import ExtractionInsufficientTextError
from campus_cv.extraction.models import ExtractionMethod
from campus_cv.extraction.text_cleaning import clean_docx_text


class DocxRawTextStrategy(BaseTextStrategy):
    """Structure-aware text via python-docx: body paragraphs, then table rows."""

    method = ExtractionMethod.DOCX_RAW

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
        except Exception as exc:
            raise ExtractionInsufficientTextError(
                f"python-docx could not open document: {exc}"
            ) from exc

        lines = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                cells: list[str] = []
                for cell in row.cells:
                    text = cell.text.strip()
                    # merged cells are reported once per grid column
                    if text and (not cells or cells[-1] != text):
                        cells.append(text)
                if cells:
                    lines.append(" | ".join(cells))
        return clean_docx_text("\n".join(lines))
