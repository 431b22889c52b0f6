"""Whitespace and character normalization shared by the extractors."""

import re

_ESCAPED_LINE_BREAK = re.compile(r"\\[nr]")
_ESCAPED_TAB = re.compile(r"\\t")
_INLINE_WHITESPACE = re.compile(r"[^\S\n]+")
_PADDED_BREAKS = re.compile(r" ?\n[\s]*")
# Printable ASCII, newline, Latin-1 supplement through Latin Extended-B,
# and Latin Extended Additional.
_NON_LATIN = re.compile(r"[^\x20-\x7E\n\u00A0-\u024F\u1E00-\u1EFF]")

_INLINE_SPACE = re.compile(r"[ \t]+")
_SPACE_AFTER_BREAK = re.compile(r"\n[ \t]+")
_SPACE_BEFORE_BREAK = re.compile(r"[ \t]+\n")
_EXCESS_BREAKS = re.compile(r"\n{3,}")
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")

_PDF_ESCAPES = {
    "n": "\n",
    "r": "\n",
    "t": " ",
    "\\": "\\",
    "'": "'",
    '"': '"',
}
_PDF_ESCAPE = re.compile(r"\\([nrt\\'\"])")


def unescape_pdf_string(text: str) -> str:
    """Resolve the backslash escapes found in PDF literal strings."""
    return _PDF_ESCAPE.sub(lambda m: _PDF_ESCAPES[m.group(1)], text)


def normalize_pdf_text(text: str) -> str:
    """Collapse whitespace and drop characters outside the Latin ranges.

    Line breaks survive as single ``\\n`` so section boundaries stay visible
    to the structuring prompt.
    """
    text = _ESCAPED_LINE_BREAK.sub("\n", text)
    text = _ESCAPED_TAB.sub(" ", text)
    return normalize_ocr_text(text)


def normalize_ocr_text(text: str) -> str:
    """Same whitespace rules as PDF text, minus the escape handling."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _NON_LATIN.sub(" ", text)
    text = _INLINE_WHITESPACE.sub(" ", text)
    text = _PADDED_BREAKS.sub("\n", text)
    return text.strip()


def clean_docx_text(text: str) -> str:
    """Normalize intra-line whitespace while keeping paragraph breaks."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _INLINE_SPACE.sub(" ", text)
    text = _SPACE_AFTER_BREAK.sub("\n", text)
    text = _SPACE_BEFORE_BREAK.sub("\n", text)
    text = _EXCESS_BREAKS.sub("\n\n", text)
    text = text.strip()
    return _CONTROL_CHARS.sub("", text)
