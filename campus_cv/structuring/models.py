from dataclasses import dataclass, field


@dataclass
class PersonalInfo:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "summary": self.summary,
        }


@dataclass
class Education:
    id: str
    institution: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    grade: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "institution": self.institution,
            "degree": self.degree,
            "fieldOfStudy": self.field_of_study,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "grade": self.grade,
        }


@dataclass
class Experience:
    id: str
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    description: str = ""
    location: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "company": self.company,
            "position": self.position,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "description": self.description,
            "location": self.location,
        }


@dataclass
class Project:
    id: str
    title: str = ""
    description: str = ""
    technologies: list[str] = field(default_factory=list)
    link: str = ""
    start_date: str = ""
    end_date: str = ""

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "technologies": list(self.technologies),
            "link": self.link,
            "startDate": self.start_date,
            "endDate": self.end_date,
        }


@dataclass
class Language:
    language: str = ""
    proficiency: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"language": self.language, "proficiency": self.proficiency}


@dataclass
class Certification:
    id: str
    name: str = ""
    issuer: str = ""
    date: str = ""
    credential_id: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "issuer": self.issuer,
            "date": self.date,
            "credentialId": self.credential_id,
        }


@dataclass
class ParsedCVData:
    """Structured resume record handed to the profile editing form.

    Mutable: the form edits fields in place before the user saves.
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    education: list[Education] = field(default_factory=list)
    experience: list[Experience] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    languages: list[Language] = field(default_factory=list)
    certifications: list[Certification] = field(default_factory=list)

    def entry_ids(self) -> list[str]:
        entries: list[Education | Experience | Project | Certification] = [
            *self.education,
            *self.experience,
            *self.projects,
            *self.certifications,
        ]
        return [entry.id for entry in entries]

    def to_dict(self) -> dict[str, object]:
        """Serialize with the camelCase field names used on the wire."""
        return {
            "personalInfo": self.personal_info.to_dict(),
            "education": [e.to_dict() for e in self.education],
            "experience": [e.to_dict() for e in self.experience],
            "projects": [p.to_dict() for p in self.projects],
            "skills": list(self.skills),
            "languages": [lang.to_dict() for lang in self.languages],
            "certifications": [c.to_dict() for c in self.certifications],
        }
