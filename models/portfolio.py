import logging
from typing import Any, List, Literal, Optional, Type, TypeVar, Union
from typing_extensions import Annotated
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound="PortfolioRecord")


class PortfolioRecord(BaseModel):
    """Backend records are opaque JSON; only the fields we render are typed."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    id: Optional[Any] = Field(default=None, validation_alias=AliasChoices("id", "_id"))

    @field_validator("*", mode="wrap")
    @classmethod
    def drop_unexpected_shape(cls, value, handler, info):
        # A field we cannot read is rendered as missing rather than failing the record
        try:
            return handler(value)
        except ValidationError:
            logger.warning(f"Ignoring unexpected {cls.__name__}.{info.field_name} value: {value!r}")
            return None


class About(PortfolioRecord):
    name: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    github_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    tagline: Optional[str] = None
    expertise: Optional[str] = None
    current_focus: Optional[str] = None
    availability: Optional[str] = None
    resume_url: Optional[str] = None


class Skill(PortfolioRecord):
    name: Optional[str] = None
    category: Optional[str] = None
    level: Optional[Any] = None
    icon: Optional[str] = None
    color: Optional[str] = None


def _as_list(value):
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return value


class Project(PortfolioRecord):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    technologies: Optional[Any] = None
    highlights: Optional[List[Any]] = None
    github_link: Optional[str] = None
    live_link: Optional[str] = None
    image_url: Optional[str] = None
    featured: Optional[bool] = False
    completed_date: Optional[Any] = None

    @field_validator("highlights", mode="before")
    @classmethod
    def split_highlights(cls, v):
        return _as_list(v)


class Experience(PortfolioRecord):
    position: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None
    # ISO strings, epoch milliseconds or [year, month, day] arrays
    start_date: Optional[Any] = None
    end_date: Optional[Any] = None
    current: Optional[bool] = False
    achievements: Optional[List[Any]] = None

    @field_validator("achievements", mode="before")
    @classmethod
    def split_achievements(cls, v):
        return _as_list(v)


def parse_record(model: Type[RecordT], raw: Any) -> Optional[RecordT]:
    """Validate one backend record, or ``None`` when it is not an object at all."""
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Skipping malformed {model.__name__} record: {e.errors()[0]['msg']}")
        return None


def parse_records(model: Type[RecordT], items: List[Any]) -> List[RecordT]:
    records = (parse_record(model, raw) for raw in items)
    return [r for r in records if r is not None]


# Tagged result of a read call. The backend answers some resources with a
# bare object and others with an array; callers iterate ``.items`` either way.
class Single(BaseModel):
    kind: Literal["single"] = "single"
    item: Any

    @property
    def items(self) -> List[Any]:
        return [self.item]


class Collection(BaseModel):
    kind: Literal["collection"] = "collection"
    items: List[Any] = []


ResourceResult = Annotated[Union[Single, Collection], Field(discriminator="kind")]


def normalize_payload(payload: Any) -> ResourceResult:
    if payload is None:
        return Collection(items=[])
    if isinstance(payload, list):
        return Collection(items=payload)
    return Single(item=payload)


class PortfolioSnapshot(BaseModel):
    """Content frozen for one chat conversation. ``None`` means not loaded."""

    about: Optional[About] = None
    projects: Optional[List[Project]] = None
    experience: Optional[List[Experience]] = None
