"""AI-powered resume structurer."""

from pathlib import Path

from campus_cv.logging.logger import Log
from campus_cv.structuring.base import BaseStructurer
from campus_cv.structuring.client_base import BaseCompletionClient
from campus_cv.structuring.exceptions import AIServiceUnavailableError
from campus_cv.structuring.models import ParsedCVData
from campus_cv.structuring.prompt_loader import load_json_schema, load_prompt_template
from campus_cv.structuring.reshaper import reshape_cv_data
from campus_cv.structuring.response_parser import parse_json_reply


class CVStructurer(BaseStructurer):
    """Extracts a ParsedCVData record from resume text with one completion call.

    Only ``AIServiceUnavailableError`` is retried, up to ``max_retries``
    times. A malformed reply fails immediately.
    """

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.0,
        max_retries: int = 1,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_retries = max(0, max_retries)
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)

    def structure(self, text: str, file_name: str) -> ParsedCVData:
        prompt = self._build_prompt(text, file_name)
        Log.debug(f"Structuring prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = parse_json_reply(raw_response)
        result = reshape_cv_data(parsed)

        Log.info(
            f"Structured {file_name}: {len(result.education)} education, "
            f"{len(result.experience)} experience, {len(result.projects)} projects, "
            f"{len(result.skills)} skills"
        )
        return result

    def _build_prompt(self, text: str, file_name: str) -> str:
        return self._prompt_template.format(
            file_name=file_name,
            resume_text=text,
            json_schema=self._json_schema,
        )

    def _call_ai(self, prompt: str) -> str:
        attempt = 0
        while True:
            attempt += 1
            try:
                return self._client.create_completion(
                    model=self._model,
                    temperature=self._temperature,
                    prompt=prompt,
                )
            except AIServiceUnavailableError as exc:
                if attempt > self._max_retries:
                    Log.error(f"AI service unavailable after {attempt} attempts: {exc}")
                    raise
                Log.warning(f"AI service call failed (attempt {attempt}), retrying: {exc}")
