"""Pulls the JSON object out of a free-text model completion."""

import json
import re
from typing import Any

from campus_cv.structuring.exceptions import AIResponseMalformedError

_OPENING_FENCE = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?```\s*$")

_decoder = json.JSONDecoder()


def strip_code_fences(raw: str) -> str:
    """Remove a leading ```lang fence and a trailing ``` fence, if present."""
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def find_json_object(text: str) -> dict[str, Any] | None:
    """Decode the JSON object that starts at the first ``{`` in ``text``.

    Commentary before the object and anything after its closing brace is
    ignored. When that first object does not decode the result is ``None``;
    objects nested inside it are never tried.
    """
    start = text.find("{")
    if start == -1:
        return None
    try:
        value, _end = _decoder.raw_decode(text, start)
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, dict) else None


def parse_json_reply(raw: str) -> dict[str, Any]:
    """Decode a model reply into a JSON object.

    Raises:
        AIResponseMalformedError: if no JSON object can be found.
    """
    parsed = find_json_object(strip_code_fences(raw))
    if parsed is None:
        preview = raw.strip()[:200]
        raise AIResponseMalformedError(
            f"No valid JSON object found in AI response: {preview!r}"
        )
    return parsed
