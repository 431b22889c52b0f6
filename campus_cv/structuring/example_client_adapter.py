"""Example completion client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in StructurerFactory.
"""

import json
from typing import ClassVar

from campus_cv.structuring.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Example adapter that returns a fixed CV reply wrapped in code fences.

    No network calls. Useful for local development and tests; the fences
    exercise the same cleanup path as a real model that ignores instructions.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "personalInfo": {
            "firstName": "Jane",
            "lastName": "Doe",
            "email": "jane.doe@example.com",
            "phone": "",
            "location": "",
            "summary": "",
        },
        "education": [],
        "experience": [],
        "projects": [],
        "skills": [],
        "languages": [],
        "certifications": [],
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
    ) -> str:
        _ = model, temperature, prompt
        return "```json\n" + json.dumps(self._response) + "\n```"
