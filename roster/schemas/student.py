from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Keys are stored in 32-bit integer columns
KEY_MIN = -2**31
KEY_MAX = 2**31 - 1
StudentKey = Annotated[int, Field(ge=KEY_MIN, le=KEY_MAX)]


def _match_fields_case_insensitively(model: type[BaseModel], data: Any) -> Any:
    """Rename incoming keys to field names ignoring case and underscores."""
    if not isinstance(data, dict):
        return data

    lookup = {}
    for name, field in model.model_fields.items():
        lookup[name.replace("_", "").lower()] = name
        if field.alias:
            lookup[field.alias.replace("_", "").lower()] = name

    matched = {}
    for key, value in data.items():
        name = lookup.get(str(key).replace("_", "").lower()) if isinstance(key, str) else None
        matched[name or key] = value
    return matched


class StudentIn(BaseModel):
    """Body of POST/PUT /students. teacherId and schoolId are derived server-side."""

    id: StudentKey = 0
    name: str | None = None
    class_id: StudentKey = 0
    teacher_id: int | None = None
    school_id: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _case_insensitive_keys(cls, data: Any) -> Any:
        return _match_fields_case_insensitively(cls, data)


class StudentOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    class_id: int
    teacher_id: int
    school_id: int
