"""Re-shapes untrusted model JSON into a complete ParsedCVData record.

This is the boundary between model output and the rest of the pipeline:
whatever the reply contains, the returned record has every field, every
scalar is a ``str`` and every collection is a ``list``. Ids in the reply are
ignored and regenerated so they are unique within one parse.
"""

import uuid
from typing import Any

from campus_cv.structuring.models import (
    Certification,
    Education,
    Experience,
    Language,
    ParsedCVData,
    PersonalInfo,
    Project,
)


def reshape_cv_data(data: dict[str, Any], *, id_suffix: str | None = None) -> ParsedCVData:
    """Build a ParsedCVData from a parsed JSON object, defaulting every gap.

    Args:
        data: Object decoded from the model reply. Any shape is tolerated.
        id_suffix: Suffix appended to synthesized ids. A random one is used
            when omitted.
    """
    suffix = id_suffix or uuid.uuid4().hex[:8]
    return ParsedCVData(
        personal_info=_build_personal_info(data.get("personalInfo")),
        education=[
            _build_education(item, f"edu-{i}-{suffix}")
            for i, item in enumerate(_objects(data.get("education")), start=1)
        ],
        experience=[
            _build_experience(item, f"exp-{i}-{suffix}")
            for i, item in enumerate(_objects(data.get("experience")), start=1)
        ],
        projects=[
            _build_project(item, f"proj-{i}-{suffix}")
            for i, item in enumerate(_objects(data.get("projects")), start=1)
        ],
        skills=_strings(data.get("skills")),
        languages=_build_languages(data.get("languages")),
        certifications=[
            _build_certification(item, f"cert-{i}-{suffix}")
            for i, item in enumerate(_objects(data.get("certifications")), start=1)
        ],
    )


def _text(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    # bool is an int subclass; true/false carry no text
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return ""


def _mapping(raw: Any) -> dict[str, Any]:
    return raw if isinstance(raw, dict) else {}


def _objects(raw: Any) -> list[dict[str, Any]]:
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, dict)]


def _strings(raw: Any) -> list[str]:
    if not isinstance(raw, list):
        return []
    values = (_text(item).strip() for item in raw)
    return [value for value in values if value]


def _build_personal_info(raw: Any) -> PersonalInfo:
    info = _mapping(raw)
    return PersonalInfo(
        first_name=_text(info.get("firstName")),
        last_name=_text(info.get("lastName")),
        email=_text(info.get("email")),
        phone=_text(info.get("phone")),
        location=_text(info.get("location")),
        summary=_text(info.get("summary")),
    )


def _build_education(item: dict[str, Any], entry_id: str) -> Education:
    return Education(
        id=entry_id,
        institution=_text(item.get("institution")),
        degree=_text(item.get("degree")),
        field_of_study=_text(item.get("fieldOfStudy")),
        start_date=_text(item.get("startDate")),
        end_date=_text(item.get("endDate")),
        grade=_text(item.get("grade")),
    )


def _build_experience(item: dict[str, Any], entry_id: str) -> Experience:
    return Experience(
        id=entry_id,
        company=_text(item.get("company")),
        position=_text(item.get("position")),
        start_date=_text(item.get("startDate")),
        end_date=_text(item.get("endDate")),
        description=_text(item.get("description")),
        location=_text(item.get("location")),
    )


def _build_project(item: dict[str, Any], entry_id: str) -> Project:
    return Project(
        id=entry_id,
        title=_text(item.get("title")),
        description=_text(item.get("description")),
        technologies=_strings(item.get("technologies")),
        link=_text(item.get("link")),
        start_date=_text(item.get("startDate")),
        end_date=_text(item.get("endDate")),
    )


def _build_languages(raw: Any) -> list[Language]:
    if not isinstance(raw, list):
        return []
    languages = []
    for item in raw:
        # models sometimes answer ["English", "French"]
        if isinstance(item, str):
            if item.strip():
                languages.append(Language(language=item.strip()))
        elif isinstance(item, dict):
            languages.append(
                Language(
                    language=_text(item.get("language")),
                    proficiency=_text(item.get("proficiency")),
                )
            )
    return languages


def _build_certification(item: dict[str, Any], entry_id: str) -> Certification:
    return Certification(
        id=entry_id,
        name=_text(item.get("name")),
        issuer=_text(item.get("issuer")),
        date=_text(item.get("date")),
        credential_id=_text(item.get("credentialId")),
    )
