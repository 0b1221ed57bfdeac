import json
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Type, TypedDict, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


# =========================
# REQUEST SCHEMAS
# =========================

class GenerationRequest(BaseModel):
    """Base for route bodies. Unknown keys are ignored, like the frontend expects."""

    model_config = ConfigDict(extra="ignore")

    # Message returned when a required field is missing or empty
    missing_message: ClassVar[str] = "Invalid request"

    @field_validator("*", mode="before")
    @classmethod
    def as_text(cls, value: Any) -> Optional[str]:
        """Fields are checked for presence only: falsy means absent, anything else becomes text."""
        if not value:
            return None
        if isinstance(value, str):
            return value
        return json.dumps(value)


class PromptRequest(GenerationRequest):
    genre: Optional[str] = None


class CharacterRequest(GenerationRequest):
    missing_message: ClassVar[str] = "Description is required"

    description: str = Field(..., min_length=1)


class SceneRequest(GenerationRequest):
    missing_message: ClassVar[str] = "Scene description is required"

    description: str = Field(..., min_length=1)


class WorldRequest(GenerationRequest):
    missing_message: ClassVar[str] = "World concept is required"

    concept: str = Field(..., min_length=1)


class ContinueStoryRequest(GenerationRequest):
    missing_message: ClassVar[str] = "Story text is required"

    story_text: str = Field(..., min_length=1, alias="storyText")
    direction: Optional[str] = None


@dataclass(frozen=True)
class ValidationFailure:
    field: str
    message: str


RequestT = TypeVar("RequestT", bound=GenerationRequest)


def validate_request(
    model: Type[RequestT], body: Dict[str, Any]
) -> Union[RequestT, ValidationFailure]:
    """
    Turn a loose JSON body into a typed request.

    A missing or empty required field maps to the route's own message.
    """
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error.get("loc") else ""
        return ValidationFailure(field=field, message=model.missing_message)


# =========================
# RESPONSE SHAPES
# =========================
# Entities parsed from model JSON are passed through as-is, so these
# describe the expected keys rather than enforce them.

class Character(TypedDict, total=False):
    name: str
    backstory: str
    traits: List[str]
    appearance: str
    portraitUrl: str


class World(TypedDict, total=False):
    name: str
    description: str
    history: str
    features: List[str]
    imageUrl: str


class Continuation(TypedDict, total=False):
    continuation: str
    suggestions: List[str]
    imageUrl: str
