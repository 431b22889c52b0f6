"""Removes PDF file-structure syntax that never carries page text.

Encoded streams (anything with a ``/Filter``, and image XObjects) are
unreadable without decoding, and the document information dictionary only
holds producer metadata. Left in place, both feed the text passes with
plausible-looking junk that would mask an image-only PDF.
"""

import re

_STREAM_BLOCK = re.compile(r"(?<!end)stream\r?\n(.*?)endstream", re.DOTALL)
_UNREADABLE_STREAM_MARKERS = re.compile(r"/Filter\b|/Subtype\s*/Image\b")
_METADATA_ENTRY = re.compile(
    r"/(?:Author|Creator|Producer|CreationDate|ModDate|Title|Subject|Keywords|Trapped)\s*"
    r"(?:\((?:\\.|[^\\)])*\)|<[0-9A-Fa-f\s]*>|/[^\s/<>\[\]()]*)",
    re.DOTALL,
)
_FILE_ID = re.compile(r"/ID\s*\[[^\]]*\]")
_COMMENT_LINE = re.compile(r"^[ \t]*%[^\r\n]*", re.MULTILINE)

_NAME = re.compile(r"/[^\s/<>\[\]()]+")
_INNERMOST_DICTIONARY = re.compile(r"<<(?:(?!<<|>>).)*>>", re.DOTALL)
STRUCTURAL_KEYWORDS = frozenset(
    {
        "obj",
        "endobj",
        "stream",
        "endstream",
        "xref",
        "trailer",
        "startxref",
        "true",
        "false",
        "null",
        "BDC",
        "BMC",
        "EMC",
    }
)


def _drop_unreadable_stream(match: re.Match[str]) -> str:
    # the stream dictionary sits between the object header and the keyword
    header_start = match.string.rfind("obj", 0, match.start())
    header = match.string[max(header_start, 0) : match.start()]
    if _UNREADABLE_STREAM_MARKERS.search(header):
        return "\n"
    return match.group(0)


def strip_non_text_regions(decoded: str) -> str:
    """Blank out encoded streams, metadata values, file ids and comments."""
    text = _STREAM_BLOCK.sub(_drop_unreadable_stream, decoded)
    text = _METADATA_ENTRY.sub(" ", text)
    text = _FILE_ID.sub(" ", text)
    return _COMMENT_LINE.sub("", text)


def strip_object_syntax(text: str) -> str:
    """Remove names and dictionary bodies, leaving only bare operands."""
    text = _NAME.sub(" ", text)
    previous = None
    while previous != text:
        previous = text
        text = _INNERMOST_DICTIONARY.sub(" ", text)
    return text
