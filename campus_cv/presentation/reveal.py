"""Staged, section-by-section reveal of a parsed CV to the editing form.

The sequence itself is pure; timing belongs to whoever iterates it.
``ProgressiveRevealer`` is the blocking driver used by the command line.
"""

import copy
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum

from campus_cv.logging.logger import Log
from campus_cv.structuring.models import ParsedCVData


class Section(Enum):
    PERSONAL_INFO = "personalInfo"
    EDUCATION = "education"
    EXPERIENCE = "experience"
    PROJECTS = "projects"
    SKILLS = "skills"
    LANGUAGES = "languages"
    CERTIFICATIONS = "certifications"


SECTION_ORDER: tuple[Section, ...] = tuple(Section)


@dataclass(frozen=True)
class RevealStep:
    section: Section
    payload: object


def reveal_sequence(data: ParsedCVData) -> Iterator[RevealStep]:
    """Yield each section of ``data`` once, in form order."""
    record = data.to_dict()
    for section in SECTION_ORDER:
        yield RevealStep(section=section, payload=record[section.value])


class ProgressiveRevealer:
    """Feeds reveal steps to a callback with a fixed pause between them."""

    def __init__(
        self,
        delay_seconds: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._delay_seconds = max(0.0, delay_seconds)
        self._sleep = sleep

    def play(self, data: ParsedCVData, on_section: Callable[[RevealStep], None]) -> int:
        """Reveal every section; returns the number of sections revealed."""
        count = 0
        for step in reveal_sequence(data):
            if count and self._delay_seconds:
                self._sleep(self._delay_seconds)
            on_section(step)
            count += 1
            Log.debug(f"Revealed section {step.section.value}")
        return count


class FormState:
    """Editable form values, filled in as sections are revealed."""

    def __init__(self) -> None:
        self._values: dict[str, object] = {}
        self._revealed: list[Section] = []

    @property
    def revealed(self) -> list[Section]:
        return list(self._revealed)

    @property
    def is_complete(self) -> bool:
        return set(self._revealed) == set(SECTION_ORDER)

    def apply(self, step: RevealStep) -> None:
        if step.section in self._revealed:
            raise ValueError(f"Section {step.section.value} was already revealed")
        self._values[step.section.value] = copy.deepcopy(step.payload)
        self._revealed.append(step.section)

    def update(self, section: Section, value: object) -> None:
        """Replace a revealed section with a user-edited value."""
        if section not in self._revealed:
            raise ValueError(f"Section {section.value} has not been revealed yet")
        self._values[section.value] = value

    def to_dict(self) -> dict[str, object]:
        return {
            section.value: copy.deepcopy(self._values[section.value])
            for section in SECTION_ORDER
            if section in self._revealed
        }
