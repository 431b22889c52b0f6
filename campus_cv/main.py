import argparse
import json
import sys
from pathlib import Path

from campus_cv.config.settings import Settings
from campus_cv.extraction.exceptions import (
    ExtractionError,
    ExtractionFailedError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from campus_cv.logging.logger import Log
from campus_cv.presentation.reveal import FormState, ProgressiveRevealer, RevealStep
from campus_cv.processor.exceptions import FileReadError, ProcessorError
from campus_cv.processor.file_loader import FileLoader
from campus_cv.processor.processor import build_processor
from campus_cv.structuring.exceptions import (
    AIProviderConfigError,
    AIResponseMalformedError,
    AIServiceUnavailableError,
    StructuringError,
)

_SUGGESTIONS: list[tuple[type[Exception], str]] = [
    (UnsupportedFileTypeError, "Please upload a PDF, DOCX, or TXT file."),
    (FileTooLargeError, "Please select a smaller file."),
    (
        ExtractionFailedError,
        "Try converting your resume to DOCX or ensure the PDF has selectable text.",
    ),
    (AIResponseMalformedError, "Please try again in a moment."),
    (AIServiceUnavailableError, "The AI service is unavailable. Please try again later."),
    (AIProviderConfigError, "Check the AI_PROVIDER setting and its credentials."),
    (FileReadError, "Check the file path and permissions."),
]


def user_message(exc: Exception) -> str:
    """Error text with a next-step suggestion for the person uploading."""
    for exc_type, suggestion in _SUGGESTIONS:
        if isinstance(exc, exc_type):
            return f"{exc} {suggestion}"
    return str(exc)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="campus-cv",
        description="Extract a structured CV record from a PDF, DOCX or TXT resume.",
    )
    parser.add_argument("path", type=Path, help="resume file to parse")
    parser.add_argument(
        "--mime-type",
        default=None,
        help="declared MIME type (guessed from the extension by default)",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="print sections one at a time as the form would receive them",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build pipeline -> parse one file."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        document = FileLoader().load(args.path, mime_type=args.mime_type)
        processor = build_processor(settings)
        parsed = processor.process(document)
    except (ExtractionError, StructuringError, ProcessorError) as exc:
        Log.error(f"Failed to parse {args.path}: {exc}")
        print(user_message(exc), file=sys.stderr)
        return 1

    if not args.reveal:
        print(json.dumps(parsed.to_dict(), indent=2, ensure_ascii=False))
        return 0

    form = FormState()

    def show(step: RevealStep) -> None:
        form.apply(step)
        print(json.dumps({step.section.value: step.payload}, indent=2, ensure_ascii=False))

    ProgressiveRevealer(settings.reveal_delay_seconds).play(parsed, show)
    return 0


if __name__ == "__main__":
    sys.exit(main())
