from pathlib import Path

from campus_cv.structuring.exceptions import StructuringError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the CV extraction prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled cv_extraction_prompt.txt.

    Returns:
        The raw template string with ``{file_name}``, ``{resume_text}`` and
        ``{json_schema}`` placeholders.

    Raises:
        StructuringError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "cv_extraction_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StructuringError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the example JSON shape embedded in the prompt.

    Raises:
        StructuringError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "cv_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StructuringError(f"Failed to load JSON schema: {exc}") from exc
