"""User profile model collected by the multi-step form.

Updates:
    v0.1.0 - 2026-10-19 - Pydantic profile with camelCase aliases and height forms.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .errors import ProfileValidationError


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Goal(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"
    ENDURANCE = "endurance"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class WorkoutExperience(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# Choices offered by the form; free text outside these lists is still accepted.
WORKOUT_TIME_OPTIONS = (
    "15 minutes",
    "30 minutes",
    "45 minutes",
    "60 minutes",
    "90 minutes",
    "120 minutes",
)
COOKING_TIME_OPTIONS = WORKOUT_TIME_OPTIONS
EQUIPMENT_OPTIONS = (
    "dumbbells",
    "barbell",
    "kettlebell",
    "resistance_bands",
    "yoga_mat",
    "none",
)
DIET_OPTIONS = (
    "vegetarian",
    "vegan",
    "gluten_free",
    "dairy_free",
    "low_carb",
    "high_protein",
    "mediterranean",
    "keto",
    "paleo",
    "none",
)
RESTRICTION_OPTIONS = ("vegetarian", "vegan", "gluten_free", "dairy_free", "none")


class UserProfile(BaseModel):
    """Immutable fitness profile submitted once per plan request.

    Height is given either as feet plus inches or in centimeters, never both.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        str_strip_whitespace=True,
        extra="ignore",
    )

    age: int = Field(ge=18, le=100)
    gender: Gender
    height_feet: Optional[int] = Field(default=None, ge=4, le=7)
    height_inches: Optional[int] = Field(default=None, ge=0, le=11)
    height_cm: Optional[float] = Field(default=None, ge=100, le=250)
    weight: float = Field(ge=30, le=300)
    goal: Goal
    activity_level: ActivityLevel
    workout_experience: WorkoutExperience
    available_time: str = Field(min_length=1)
    equipment: tuple[str, ...] = ()
    diet_preferences: tuple[str, ...] = ()
    dietary_restrictions: tuple[str, ...] = ()
    available_cook_time: Optional[str] = None
    additional_notes: Optional[str] = None

    @field_validator("equipment", "diet_preferences", "dietary_restrictions", mode="before")
    @classmethod
    def _normalise_collection(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        seen: dict[str, None] = {}
        for item in value:
            text = str(item).strip()
            if text:
                seen.setdefault(text, None)
        return tuple(seen)

    @field_validator("available_cook_time", "additional_notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _check_height_form(self) -> "UserProfile":
        imperial = (self.height_feet, self.height_inches)
        if self.height_cm is not None:
            if any(part is not None for part in imperial):
                raise ValueError("Provide height in feet and inches or in centimeters, not both")
        elif None in imperial:
            raise ValueError("Please select both feet and inches")
        return self

    @property
    def height_in_cm(self) -> int:
        """Height in whole centimeters, rounding halves up."""

        if self.height_cm is not None:
            return int(self.height_cm + 0.5)
        total_inches = 12 * (self.height_feet or 0) + (self.height_inches or 0)
        # 1 in = 2.54 cm exactly; integer math keeps 6'3" at 191 rather than 190.
        return (254 * total_inches + 50) // 100

    @classmethod
    def parse(cls, payload: Mapping[str, Any]) -> "UserProfile":
        """Validate a raw submission.

        Raises:
            ProfileValidationError: With one message per offending field.
        """

        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise ProfileValidationError.from_pydantic(exc.errors()) from exc


__all__ = [
    "ActivityLevel",
    "COOKING_TIME_OPTIONS",
    "DIET_OPTIONS",
    "EQUIPMENT_OPTIONS",
    "Gender",
    "Goal",
    "RESTRICTION_OPTIONS",
    "UserProfile",
    "WORKOUT_TIME_OPTIONS",
    "WorkoutExperience",
]
