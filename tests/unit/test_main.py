import json
from pathlib import Path
from unittest.mock import patch

import pytest

from campus_cv.extraction.exceptions import ExtractionFailedError, UnsupportedFileTypeError
from campus_cv.main import main, user_message
from campus_cv.structuring.exceptions import AIServiceUnavailableError, StructuringError


@pytest.fixture(autouse=True)
def _example_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AI_PROVIDER", "example")
    monkeypatch.setenv("REVEAL_DELAY_SECONDS", "0")


class TestUserMessage:
    def test_unsupported_type_suggests_formats(self) -> None:
        message = user_message(UnsupportedFileTypeError("Unsupported file type."))
        assert message.endswith("Please upload a PDF, DOCX, or TXT file.")

    def test_extraction_failure_suggests_docx(self) -> None:
        message = user_message(ExtractionFailedError("Failed to extract text from PDF."))
        assert "DOCX" in message

    def test_unknown_error_is_passed_through(self) -> None:
        assert user_message(RuntimeError("boom")) == "boom"


class TestMain:
    def test_prints_parsed_record(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe\njane.doe@example.com", encoding="utf-8")

        with patch("campus_cv.main.Log"):
            exit_code = main([str(path)])

        assert exit_code == 0
        record = json.loads(capsys.readouterr().out)
        assert record["personalInfo"]["email"] == "jane.doe@example.com"
        assert record["education"] == []

    def test_reveal_prints_one_section_at_a_time(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe", encoding="utf-8")

        with patch("campus_cv.main.Log"):
            exit_code = main([str(path), "--reveal"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert out.index('"personalInfo"') < out.index('"certifications"')

    def test_unsupported_file_exits_with_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "photo.png"
        path.write_bytes(b"\x89PNG\r\n\x1a\n")

        with patch("campus_cv.main.Log") as mock_log:
            exit_code = main([str(path)])

        assert exit_code == 1
        assert "Please upload a PDF, DOCX, or TXT file." in capsys.readouterr().err
        mock_log.error.assert_called_once()

    def test_missing_file_exits_with_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("campus_cv.main.Log"):
            exit_code = main([str(tmp_path / "missing.pdf")])

        assert exit_code == 1
        assert "File not found" in capsys.readouterr().err

    def test_ai_outage_exits_with_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe", encoding="utf-8")

        with (
            patch("campus_cv.main.Log"),
            patch(
                "campus_cv.structuring.example_client_adapter.ExampleClientAdapter.create_completion",
                side_effect=AIServiceUnavailableError("provider down"),
            ),
        ):
            exit_code = main([str(path)])

        assert exit_code == 1
        assert "provider down" in capsys.readouterr().err

    def test_unknown_provider_exits_with_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("AI_PROVIDER", "nope")
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe", encoding="utf-8")

        with patch("campus_cv.main.Log") as mock_log:
            exit_code = main([str(path)])

        assert exit_code == 1
        err = capsys.readouterr().err
        assert "Unknown AI provider 'nope'" in err
        assert "AI_PROVIDER" in err
        mock_log.error.assert_called_once()

    def test_unreadable_prompt_template_exits_with_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe", encoding="utf-8")

        with (
            patch("campus_cv.main.Log"),
            patch(
                "campus_cv.structuring.structurer.load_prompt_template",
                side_effect=StructuringError("Failed to load prompt template: missing"),
            ),
        ):
            exit_code = main([str(path)])

        assert exit_code == 1
        assert "Failed to load prompt template" in capsys.readouterr().err
