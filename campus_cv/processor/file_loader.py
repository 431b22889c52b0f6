import mimetypes
from pathlib import Path

from campus_cv.extraction.models import (
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    PLAIN_TEXT_MIME_TYPE,
    RawDocument,
)
from campus_cv.processor.exceptions import FileReadError

_KNOWN_EXTENSIONS = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
    ".txt": PLAIN_TEXT_MIME_TYPE,
}
_FALLBACK_MIME_TYPE = "application/octet-stream"


def guess_mime_type(path: Path) -> str:
    """Declared MIME type for a file, as a browser upload would report it."""
    known = _KNOWN_EXTENSIONS.get(path.suffix.lower())
    if known is not None:
        return known
    guessed, _encoding = mimetypes.guess_type(path.name)
    return guessed or _FALLBACK_MIME_TYPE


class FileLoader:
    """Reads an upload from disk into a RawDocument."""

    def load(self, path: Path, mime_type: str | None = None) -> RawDocument:
        """Read file bytes and attach the declared or guessed MIME type.

        Raises:
            FileReadError: if the file does not exist or cannot be read.
        """
        if not path.is_file():
            raise FileReadError(f"File not found: {path}")
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return RawDocument(
            content=content,
            mime_type=mime_type or guess_mime_type(path),
            file_name=path.name,
        )
