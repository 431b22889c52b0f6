"""Regex heuristics that recover text from PDF bytes without a layout engine.

Each pass reads the whole buffer independently. A pass that finds nothing
returns an empty list; none of them depend on the output of another.
"""

import re

from campus_cv.extraction.pdf.base import BasePdfTextPass
from campus_cv.extraction.text_cleaning import unescape_pdf_string

_MEANINGFUL = re.compile(r"[A-Za-z0-9@._-]")
_LITERAL = re.compile(r"\(([^)]*)\)")
_TEXT_OBJECT = re.compile(r"(?<![A-Za-z])BT\s+(.*?)\s+ET(?![A-Za-z])", re.DOTALL)
_SHOW_TEXT = re.compile(r"((?:\([^)]*\)\s*)+)Tj")
_SHOW_TEXT_ARRAY = re.compile(r"\[(.*?)\]\s*TJ", re.DOTALL)
_QUOTED = re.compile(r'"([^"]*)"')
_STREAM = re.compile(r"(?<!end)stream\s+(.*?)\s+endstream", re.DOTALL)
_READABLE_RUN = re.compile(r"[A-Za-z0-9][A-Za-z0-9\s@._-]{3,}")
_POSITIONED = re.compile(r"(?:[-\d.]+\s+[-\d.]+\s+(?:Td|TD|Tm)|\s+Tm)\s*\(([^)]*)\)")
_HEX_STRING = re.compile(r"<([0-9A-Fa-f]+)>")
_XOBJECT = re.compile(r"/XObject\s*<<(.*?)>>", re.DOTALL)
_CONTENTS_ARRAY = re.compile(r"/Contents\s*\[(.*?)\]", re.DOTALL)
_UNICODE_ESCAPE = re.compile(r"\\u([0-9A-Fa-f]{4})")


def is_meaningful(text: str) -> bool:
    return bool(text) and _MEANINGFUL.search(text) is not None


def literal_strings(content: str) -> list[str]:
    """All parenthesized literals in ``content``, unescaped and filtered."""
    fragments = []
    for match in _LITERAL.finditer(content):
        text = unescape_pdf_string(match.group(1))
        if is_meaningful(text):
            fragments.append(text)
    return fragments


class LiteralStringPass(BasePdfTextPass):
    name = "literal"

    def extract(self, content: str) -> list[str]:
        return literal_strings(content)


class TextObjectPass(BasePdfTextPass):
    """Show-text operators inside ``BT ... ET`` blocks.

    Consecutive literals feeding one ``Tj`` and the literals of a kerned
    ``TJ`` array are concatenated into a single fragment.
    """

    name = "text_object"

    def extract(self, content: str) -> list[str]:
        fragments: list[str] = []
        for block in _TEXT_OBJECT.finditer(content):
            body = block.group(1)
            for match in _SHOW_TEXT.finditer(body):
                fragments.extend(self._joined(match.group(1)))
            for match in _SHOW_TEXT_ARRAY.finditer(body):
                fragments.extend(self._joined(match.group(1)))
            for match in _QUOTED.finditer(body):
                if is_meaningful(match.group(1)):
                    fragments.append(match.group(1))
        return fragments

    @staticmethod
    def _joined(operands: str) -> list[str]:
        parts = [unescape_pdf_string(m.group(1)) for m in _LITERAL.finditer(operands)]
        text = "".join(parts)
        return [text] if is_meaningful(text) else []


class StreamContentPass(BasePdfTextPass):
    """Literals and bare printable runs inside ``stream ... endstream``."""

    name = "stream"

    def extract(self, content: str) -> list[str]:
        fragments: list[str] = []
        for block in _STREAM.finditer(content):
            body = block.group(1)
            fragments.extend(literal_strings(body))
            for match in _READABLE_RUN.finditer(body):
                text = match.group(0).strip()
                if len(text) > 3 and "/" not in text and "<<" not in text:
                    fragments.append(text)
        return fragments


class PositioningPass(BasePdfTextPass):
    """Literals shown right after a ``Td``/``TD``/``Tm`` positioning operator."""

    name = "positioning"

    def extract(self, content: str) -> list[str]:
        fragments = []
        for match in _POSITIONED.finditer(content):
            text = unescape_pdf_string(match.group(1))
            if is_meaningful(text):
                fragments.append(text)
        return fragments


class HexStringPass(BasePdfTextPass):
    name = "hex"

    def extract(self, content: str) -> list[str]:
        fragments = []
        for match in _HEX_STRING.finditer(content):
            digits = match.group(1)
            if len(digits) % 2 != 0 or len(digits) <= 2:
                continue
            text = self._decode(bytes.fromhex(digits))
            if is_meaningful(text):
                fragments.append(text)
        return fragments

    @staticmethod
    def _decode(raw: bytes) -> str:
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError:
            return "".join(
                chr(b) for b in raw if 32 <= b <= 126 or 160 <= b <= 255
            )


class QuotedStringPass(BasePdfTextPass):
    name = "quoted"

    def extract(self, content: str) -> list[str]:
        return [
            m.group(1)
            for m in _QUOTED.finditer(content)
            if is_meaningful(m.group(1)) and "/" not in m.group(1)
        ]


class XObjectPass(BasePdfTextPass):
    """Literals embedded in XObject dictionaries and ``/Contents`` arrays."""

    name = "xobject"

    def extract(self, content: str) -> list[str]:
        fragments: list[str] = []
        for pattern in (_CONTENTS_ARRAY, _XOBJECT):
            for block in pattern.finditer(content):
                fragments.extend(
                    m.group(1)
                    for m in _LITERAL.finditer(block.group(1))
                    if is_meaningful(m.group(1))
                )
        return fragments


class UnicodeEscapePass(BasePdfTextPass):
    name = "unicode_escape"

    def extract(self, content: str) -> list[str]:
        chars = (chr(int(m.group(1), 16)) for m in _UNICODE_ESCAPE.finditer(content))
        return [c for c in chars if is_meaningful(c)]


DEFAULT_PASSES: tuple[type[BasePdfTextPass], ...] = (
    LiteralStringPass,
    TextObjectPass,
    StreamContentPass,
    PositioningPass,
    HexStringPass,
    QuotedStringPass,
    XObjectPass,
    UnicodeEscapePass,
)
