"""
Front-matter schemas for every portfolio content type.

Scalar fields are strict (a quoted "2021" is not a year) and unknown keys
are ignored. Constraint failures carry the message shown to the
author, so the validator can report them verbatim.
"""

from dataclasses import dataclass
from datetime import date
from typing import Annotated, Dict, List, Optional, Tuple, Type

from email_validator import EmailNotValidError, validate_email
from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
)
from pydantic_core import PydanticCustomError

SKILL_LEVELS = ("Beginner", "Intermediate", "Advanced", "Expert")
PUBLICATION_TYPES = ("conference", "journal", "patent", "preprint")

_ANY_URL = TypeAdapter(AnyUrl)


# ───────────────────────────────────────── constraints ──
def _min_length(minimum: int, message: str) -> AfterValidator:
    def check(value):
        if len(value) < minimum:
            raise PydanticCustomError("too_short", message)
        return value
    return AfterValidator(check)


def _one_of(choices: Tuple[str, ...], message: str) -> AfterValidator:
    def check(value: str) -> str:
        if value not in choices:
            raise PydanticCustomError("enum", message)
        return value
    return AfterValidator(check)


def _url(message: str) -> AfterValidator:
    def check(value: str) -> str:
        if not is_valid_url(value):
            raise PydanticCustomError("url", message)
        return value
    return AfterValidator(check)


def is_valid_url(value: str) -> bool:
    try:
        _ANY_URL.validate_python(value)
    except ValidationError:
        return False
    return True


def _email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        raise PydanticCustomError("email", "Invalid email format") from None
    return value


def _reasonable_year(value: int) -> int:
    if not 1900 <= value <= date.today().year + 5:
        raise PydanticCustomError("year", "Year must be reasonable")
    return value


def Text(message: str, minimum: int = 1):
    return Annotated[StrictStr, _min_length(minimum, message)]


def NonEmptyList(message: str):
    return Annotated[List[StrictStr], _min_length(1, message)]


def Url(message: str):
    return Annotated[StrictStr, _url(message)]


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ───────────────────────────────────────── profile ──
class Social(_Schema):
    github: Optional[StrictStr] = None
    linkedin: Optional[StrictStr] = None
    twitter: Optional[StrictStr] = None
    scholar: Optional[StrictStr] = None


class Profile(_Schema):
    name: Text("Name is required")
    title: Text("Title is required")
    bio: Text("Bio should be at least 10 characters", 10)
    email: Annotated[StrictStr, AfterValidator(_email)]
    location: Text("Location is required")
    profileImage: Text("Profile image path is required")
    social: Social


# ───────────────────────────────────────── skills ──
class Skill(_Schema):
    name: Text("Skill name is required")
    level: Annotated[StrictStr, _one_of(SKILL_LEVELS, "Level must be one of: " + ", ".join(SKILL_LEVELS))]
    color: Text("Color is required")


class SkillCategory(_Schema):
    name: Text("Category name is required")
    skills: Annotated[List[Skill], _min_length(1, "Each category must have at least one skill")]


class Skills(_Schema):
    categories: Annotated[List[SkillCategory], _min_length(1, "At least one skill category is required")]


# ───────────────────────────────────────── collections ──
class Project(_Schema):
    title: Text("Project title is required")
    description: Text("Description should be at least 10 characters", 10)
    image: Text("Image path is required")
    github: Optional[Url("Invalid GitHub URL")] = None
    demo: Optional[Url("Invalid demo URL")] = None
    featured: StrictBool = False
    order: StrictFloat = 0
    tags: NonEmptyList("At least one tag is required")
    startDate: Optional[StrictStr] = None
    endDate: Optional[StrictStr] = None
    award: Optional[StrictStr] = None
    hackathon: Optional[StrictStr] = None
    teamSize: Optional[StrictInt] = None
    paper: Optional[Url("Invalid paper URL")] = None
    paperTitle: Optional[StrictStr] = None
    venue: Optional[StrictStr] = None


class Publication(_Schema):
    title: Text("Publication title is required")
    authors: NonEmptyList("At least one author is required")
    venue: Text("Venue is required")
    year: Annotated[StrictInt, AfterValidator(_reasonable_year)]
    url: Optional[Url("Invalid URL")] = None
    type: Annotated[StrictStr, _one_of(PUBLICATION_TYPES, "Type must be one of: " + ", ".join(PUBLICATION_TYPES))]
    doi: Optional[StrictStr] = None
    abstract: Optional[StrictStr] = None


class Experience(_Schema):
    company: Text("Company name is required")
    position: Text("Position is required")
    startDate: Text("Start date is required")
    endDate: Optional[StrictStr] = None
    location: Text("Location is required")
    logo: Optional[StrictStr] = None
    website: Optional[Url("Invalid website URL")] = None
    achievements: NonEmptyList("At least one achievement is required")
    technologies: Optional[List[StrictStr]] = None


class Advisor(_Schema):
    name: Text("Advisor name is required")
    googleScholar: Optional[StrictStr] = None


class Education(_Schema):
    institution: Text("Institution name is required")
    degree: Text("Degree is required")
    field: Text("Field of study is required")
    startDate: Text("Start date is required")
    endDate: Optional[StrictStr] = None
    location: Text("Location is required")
    logo: Optional[StrictStr] = None
    gpa: Optional[StrictStr] = None
    honors: Optional[List[StrictStr]] = None
    coursework: Optional[List[StrictStr]] = None
    thesis: Optional[StrictStr] = None
    advisors: Optional[List[Advisor]] = None


# ───────────────────────────────────────── registry ──
@dataclass(frozen=True)
class ContentKind:
    """A content type and where its files live under the content root."""

    name: str            # singular label used in messages, e.g. "project"
    directory: str       # directory under the content root, e.g. "projects"
    model: Type[BaseModel]
    single: bool = False  # True for profile/skills, which live in main.md

    @property
    def title(self) -> str:
        return self.directory.capitalize()


PROFILE = ContentKind("profile", "profile", Profile, single=True)
SKILLS = ContentKind("skills", "skills", Skills, single=True)
PROJECTS = ContentKind("project", "projects", Project)
PUBLICATIONS = ContentKind("publication", "publications", Publication)
EXPERIENCE = ContentKind("experience", "experience", Experience)
EDUCATION = ContentKind("education", "education", Education)

SINGLE_KINDS = (PROFILE, SKILLS)
COLLECTION_KINDS = (PROJECTS, PUBLICATIONS, EXPERIENCE, EDUCATION)
ALL_KINDS = SINGLE_KINDS + COLLECTION_KINDS

SINGLE_FILE_NAME = "main.md"

_BY_NAME: Dict[str, ContentKind] = {}
for _kind in ALL_KINDS:
    _BY_NAME[_kind.name] = _kind
    _BY_NAME[_kind.directory] = _kind


def get_kind(name: str) -> ContentKind:
    """Look up a content kind by singular name or directory name."""
    try:
        return _BY_NAME[name]
    except KeyError:
        valid = ", ".join(k.directory for k in ALL_KINDS)
        raise ValueError(f"Unknown content type: {name} (expected one of: {valid})") from None


def schema_issues(kind: ContentKind, metadata: dict) -> List[Tuple[Optional[str], str]]:
    """
    Validate front-matter against a kind's model.

    Returns ``(field_path, message)`` pairs; empty when the record is valid.
    Missing fields are reported as "Required".
    """
    try:
        kind.model.model_validate(metadata)
    except ValidationError as exc:
        issues = []
        for err in exc.errors():
            path = ".".join(str(part) for part in err["loc"]) or None
            message = "Required" if err["type"] == "missing" else err["msg"]
            issues.append((path, message))
        return issues
    return []
