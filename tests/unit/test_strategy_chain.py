from unittest.mock import MagicMock

import pytest

from campus_cv.extraction.base import BaseTextStrategy
from campus_cv.extraction.chain import ChainLink, StrategyChain
from campus_cv.extraction.exceptions import (
    ExtractionFailedError,
    ExtractionInsufficientTextError,
)
from campus_cv.extraction.models import ExtractionMethod


def _make_strategy(method: ExtractionMethod, result: str | Exception) -> MagicMock:
    strategy = MagicMock(spec=BaseTextStrategy)
    strategy.method = method
    if isinstance(result, Exception):
        strategy.extract.side_effect = result
    else:
        strategy.extract.return_value = result
    return strategy


def _make_chain(*links: ChainLink, min_text_length: int = 50) -> StrategyChain:
    return StrategyChain(
        list(links), min_text_length=min_text_length, failure_message="nothing readable"
    )


class TestAcceptance:
    def test_accepts_first_strategy_at_its_length(self) -> None:
        first = _make_strategy(ExtractionMethod.DOCX_RAW, "x" * 100)
        second = _make_strategy(ExtractionMethod.DOCX_MARKUP, "y" * 500)
        chain = _make_chain(ChainLink(first, 100), ChainLink(second, 50))

        result = chain.run(b"doc")

        assert result.text == "x" * 100
        assert result.method is ExtractionMethod.DOCX_RAW
        second.extract.assert_not_called()

    def test_one_char_short_moves_to_next_strategy(self) -> None:
        first = _make_strategy(ExtractionMethod.DOCX_RAW, "x" * 99)
        second = _make_strategy(ExtractionMethod.DOCX_MARKUP, "y" * 120)
        chain = _make_chain(ChainLink(first, 100), ChainLink(second, 50))

        result = chain.run(b"doc")

        assert result.method is ExtractionMethod.DOCX_MARKUP
        second.extract.assert_called_once_with(b"doc")

    def test_keeps_longer_earlier_candidate(self) -> None:
        first = _make_strategy(ExtractionMethod.DOCX_RAW, "x" * 80)
        second = _make_strategy(ExtractionMethod.DOCX_MARKUP, "y" * 60)
        chain = _make_chain(ChainLink(first, 100), ChainLink(second, 50))

        result = chain.run(b"doc")

        assert result.method is ExtractionMethod.DOCX_RAW
        assert result.text == "x" * 80

    def test_later_strategy_can_reach_earlier_threshold(self) -> None:
        first = _make_strategy(ExtractionMethod.DOCX_RAW, "")
        second = _make_strategy(ExtractionMethod.DOCX_MARKUP, "y" * 30)
        third = _make_strategy(ExtractionMethod.DOCX_BINARY, "z" * 55)
        chain = _make_chain(ChainLink(first, 100), ChainLink(second, 50), ChainLink(third, 50))

        assert chain.run(b"doc").method is ExtractionMethod.DOCX_BINARY


class TestFallthrough:
    def test_insufficient_error_moves_forward(self) -> None:
        first = _make_strategy(
            ExtractionMethod.PDF_BYTES, ExtractionInsufficientTextError("too short")
        )
        second = _make_strategy(ExtractionMethod.PDF_OCR, "o" * 60)
        chain = _make_chain(ChainLink(first, 50), ChainLink(second, 50))

        assert chain.run(b"pdf").method is ExtractionMethod.PDF_OCR

    def test_terminal_error_propagates(self) -> None:
        first = _make_strategy(ExtractionMethod.PDF_OCR, ExtractionFailedError("ocr broke"))
        second = _make_strategy(ExtractionMethod.PDF_BYTES, "b" * 60)
        chain = _make_chain(ChainLink(first, 50), ChainLink(second, 50))

        with pytest.raises(ExtractionFailedError, match="ocr broke"):
            chain.run(b"pdf")
        second.extract.assert_not_called()

    def test_exhausted_chain_raises_failure_message(self) -> None:
        first = _make_strategy(ExtractionMethod.DOCX_RAW, "short")
        second = _make_strategy(
            ExtractionMethod.DOCX_MARKUP, ExtractionInsufficientTextError("bad zip")
        )
        chain = _make_chain(ChainLink(first, 100), ChainLink(second, 50))

        with pytest.raises(ExtractionFailedError, match="nothing readable"):
            chain.run(b"doc")

    def test_zero_threshold_accepts_empty_text(self) -> None:
        only = _make_strategy(ExtractionMethod.PLAIN_TEXT, "")
        chain = _make_chain(ChainLink(only, 0), min_text_length=0)

        assert chain.run(b"").text == ""


class TestConstruction:
    def test_requires_at_least_one_link(self) -> None:
        with pytest.raises(ValueError):
            _make_chain()

    def test_links_are_a_copy(self) -> None:
        link = ChainLink(_make_strategy(ExtractionMethod.PLAIN_TEXT, "x"), 0)
        chain = _make_chain(link)
        chain.links.clear()
        assert chain.links == [link]
