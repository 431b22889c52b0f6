from collections.abc import Sequence
from dataclasses import dataclass

from campus_cv.extraction.base import BaseTextStrategy
from campus_cv.extraction.exceptions import (
    ExtractionFailedError,
    ExtractionInsufficientTextError,
)
from campus_cv.extraction.models import ExtractedText
from campus_cv.logging.logger import Log


@dataclass(frozen=True)
class ChainLink:
    """A strategy and the length at which its best-so-far result is accepted."""

    strategy: BaseTextStrategy
    accept_length: int


class StrategyChain:
    """Walks an ordered list of strategies for one document format.

    Each step either accepts the longest candidate seen so far, moves on to
    the next strategy, or, once the list is exhausted, fails with
    ``failure_message``. ``ExtractionInsufficientTextError`` raised by a
    strategy moves the chain forward; any other extraction error is terminal.
    """

    def __init__(
        self,
        links: Sequence[ChainLink],
        *,
        min_text_length: int,
        failure_message: str,
    ) -> None:
        if not links:
            raise ValueError("StrategyChain needs at least one strategy")
        self._links = list(links)
        self._min_text_length = min_text_length
        self._failure_message = failure_message

    @property
    def links(self) -> list[ChainLink]:
        return list(self._links)

    def run(self, content: bytes) -> ExtractedText:
        best: ExtractedText | None = None
        for index, link in enumerate(self._links):
            method = link.strategy.method
            try:
                text = link.strategy.extract(content)
            except ExtractionInsufficientTextError as exc:
                Log.warning(f"Strategy {method.value} insufficient: {exc}")
                text = ""

            if best is None or len(text) > len(best.text):
                best = ExtractedText(text=text, method=method)

            if len(best.text) >= link.accept_length:
                Log.info(
                    f"Accepted {len(best.text)} chars from {best.method.value} "
                    f"after {index + 1} strategies"
                )
                return best
            Log.info(
                f"Strategy {method.value} gave {len(text)} chars "
                f"(need {link.accept_length})"
            )

        if best is not None and len(best.text) >= self._min_text_length:
            return best
        raise ExtractionFailedError(self._failure_message)
