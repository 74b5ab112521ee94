"""Prompt assembly for plan generation requests."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from ..core.profile import UserProfile

PROMPT_NAME = "fitness_plan"

NO_EQUIPMENT = "No equipment"
NO_RESTRICTIONS = "None"
NO_PREFERENCES = "No specific preferences"
NO_NOTES = "No additional notes provided"
NOT_SPECIFIED = "Not specified"


def humanize(value: object) -> str:
    """Render an enum member or option key for people (`very_active` -> `very active`)."""

    raw = value.value if isinstance(value, Enum) else value
    return str(raw).replace("_", " ")


def join_or(items: Iterable[str], placeholder: str) -> str:
    rendered = [humanize(item) for item in items]
    return ", ".join(rendered) if rendered else placeholder


def format_weight(weight: float) -> str:
    """Render the weight as submitted: `62` for whole numbers, every digit otherwise."""

    return str(int(weight)) if weight.is_integer() else repr(weight)


def describe_height(profile: UserProfile) -> str:
    """Describe height in the unit the user entered, with centimeters for imperial input."""

    if profile.height_cm is not None:
        return f"{profile.height_in_cm} cm"
    return f"{profile.height_feet}'{profile.height_inches}\" ({profile.height_in_cm} cm)"


def prompt_fields(profile: UserProfile) -> dict[str, str]:
    """Return the template substitutions for a profile."""

    return {
        "age": str(profile.age),
        "gender": humanize(profile.gender),
        "height": describe_height(profile),
        "weight": format_weight(profile.weight),
        "goal": humanize(profile.goal),
        "activity_level": humanize(profile.activity_level),
        "workout_experience": humanize(profile.workout_experience),
        "available_time": profile.available_time,
        "available_cook_time": profile.available_cook_time or NOT_SPECIFIED,
        "equipment": join_or(profile.equipment, NO_EQUIPMENT),
        "dietary_restrictions": join_or(profile.dietary_restrictions, NO_RESTRICTIONS),
        "diet_preferences": join_or(profile.diet_preferences, NO_PREFERENCES),
        "additional_notes": profile.additional_notes or NO_NOTES,
    }


def build_plan_prompt(profile: UserProfile, template: str) -> str:
    """Fill the plan template with the profile's human-readable values.

    Args:
        profile (UserProfile): Validated submission.
        template (str): Template text using `str.format` named fields.

    Returns:
        str: Prompt ready to send as a single user message.

    Raises:
        KeyError: If the template references a field that does not exist.
    """

    return template.strip().format(**prompt_fields(profile))
