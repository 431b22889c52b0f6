import json
from unittest.mock import patch

import pytest

from campus_cv.config.settings import Settings
from campus_cv.extraction.exceptions import ExtractionFailedError, UnsupportedFileTypeError
from campus_cv.extraction.models import (
    DOCX_MIME_TYPE,
    PDF_MIME_TYPE,
    PLAIN_TEXT_MIME_TYPE,
    RawDocument,
)
from campus_cv.presentation.reveal import FormState, ProgressiveRevealer
from campus_cv.processor.processor import build_processor
from campus_cv.structuring.example_client_adapter import ExampleClientAdapter
from campus_cv.structuring.exceptions import AIResponseMalformedError
from campus_cv.structuring.models import ParsedCVData

_REPLY: dict[str, object] = {
    "personalInfo": {"firstName": "Jane", "lastName": "Doe", "email": "jane.doe@example.com"},
    "education": [{"id": "edu-1", "institution": "University of Example"}],
    "experience": [{"id": "exp-1", "company": "Acme"}, {"id": "exp-1", "company": "Globex"}],
    "skills": ["Python", None, "Go"],
    "languages": ["English"],
}


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, ai_provider="example", ocr_enabled=False)


def _process(
    settings: Settings, document: RawDocument, reply: dict[str, object] = _REPLY
) -> ParsedCVData:
    with patch(
        "campus_cv.structuring.factory.ExampleClientAdapter",
        return_value=ExampleClientAdapter(reply),
    ):
        processor = build_processor(settings)
    return processor.process(document)


@pytest.mark.integration
class TestPipeline:
    def test_plain_text_resume(self, settings: Settings) -> None:
        document = RawDocument(b"Jane Doe jane@x.com", PLAIN_TEXT_MIME_TYPE, "cv.txt")

        result = _process(settings, document)

        assert result.personal_info.first_name == "Jane"
        assert [e.company for e in result.experience] == ["Acme", "Globex"]
        assert len(set(result.entry_ids())) == 3
        assert result.skills == ["Python", "Go"]
        assert result.languages[0].language == "English"

    def test_pdf_resume(self, settings: Settings, resume_pdf_bytes: bytes) -> None:
        document = RawDocument(resume_pdf_bytes, PDF_MIME_TYPE, "cv.pdf")

        with patch("campus_cv.structuring.structurer.CVStructurer.structure") as mock_structure:
            with patch(
                "campus_cv.structuring.factory.ExampleClientAdapter",
                return_value=ExampleClientAdapter(_REPLY),
            ):
                processor = build_processor(settings)
            processor.process(document)

        text, file_name = mock_structure.call_args.args
        assert "Jane Doe" in text
        assert "jane.doe@example.com" in text
        assert file_name == "cv.pdf"

    def test_docx_resume(self, settings: Settings, resume_docx_bytes: bytes) -> None:
        document = RawDocument(resume_docx_bytes, DOCX_MIME_TYPE, "cv.docx")

        result = _process(settings, document)

        assert result.education[0].institution == "University of Example"

    def test_image_upload_is_rejected(self, settings: Settings) -> None:
        document = RawDocument(b"\x89PNG\r\n\x1a\n", "image/png", "photo.png")
        with pytest.raises(UnsupportedFileTypeError):
            _process(settings, document)

    def test_image_only_pdf_without_ocr_fails(
        self, settings: Settings, image_only_pdf_bytes: bytes
    ) -> None:
        document = RawDocument(image_only_pdf_bytes, PDF_MIME_TYPE, "scan.pdf")
        with pytest.raises(ExtractionFailedError):
            _process(settings, document)

    def test_malformed_ai_reply_returns_no_record(self, settings: Settings) -> None:
        document = RawDocument(b"Jane Doe", PLAIN_TEXT_MIME_TYPE, "cv.txt")
        adapter = ExampleClientAdapter()

        with patch.object(adapter, "create_completion", return_value="I cannot do that."):
            with patch("campus_cv.structuring.factory.ExampleClientAdapter", return_value=adapter):
                processor = build_processor(settings)
            with pytest.raises(AIResponseMalformedError):
                processor.process(document)

    def test_reveal_fills_form(self, settings: Settings) -> None:
        document = RawDocument(b"Jane Doe", PLAIN_TEXT_MIME_TYPE, "cv.txt")
        result = _process(settings, document)
        form = FormState()

        ProgressiveRevealer(delay_seconds=0).play(result, form.apply)

        assert form.is_complete
        assert json.dumps(form.to_dict()) == json.dumps(result.to_dict())
