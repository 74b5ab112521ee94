"""Interactive multi-step profile form."""

from __future__ import annotations

from typing import Any, Callable

from fitplan.cli.io import console
from fitplan.cli.state import FORM_STEPS, PlanSession
from fitplan.cli.utils import (
    prompt_choice,
    prompt_float,
    prompt_int,
    prompt_multi,
    prompt_value,
)
from fitplan.core.profile import (
    COOKING_TIME_OPTIONS,
    DIET_OPTIONS,
    EQUIPMENT_OPTIONS,
    RESTRICTION_OPTIONS,
    WORKOUT_TIME_OPTIONS,
    ActivityLevel,
    Gender,
    Goal,
    UserProfile,
    WorkoutExperience,
)


def _values(enum_cls: Any) -> list[str]:
    return [member.value for member in enum_cls]


def _personal_information(answers: dict[str, Any]) -> None:
    answers["age"] = prompt_int("Age", 18, 100)
    answers["gender"] = prompt_choice("Gender", _values(Gender))
    unit = prompt_choice("Height unit", ["imperial", "metric"])
    if unit == "imperial":
        answers["heightFeet"] = prompt_int("Height (feet)", 4, 7)
        answers["heightInches"] = prompt_int("Height (inches)", 0, 11)
    else:
        answers["heightCm"] = prompt_float("Height (cm)", 100, 250)
    answers["weight"] = prompt_float("Weight (kg)", 30, 300)


def _fitness_goals(answers: dict[str, Any]) -> None:
    answers["goal"] = prompt_choice("Primary goal", _values(Goal))
    answers["activityLevel"] = prompt_choice("Activity level", _values(ActivityLevel))
    answers["workoutExperience"] = prompt_choice(
        "Workout experience", _values(WorkoutExperience)
    )


def _preferences(answers: dict[str, Any]) -> None:
    answers["availableTime"] = prompt_choice("Available workout time", WORKOUT_TIME_OPTIONS)
    answers["availableCookTime"] = prompt_choice("Available cooking time", COOKING_TIME_OPTIONS)
    answers["equipment"] = prompt_multi("Available equipment", EQUIPMENT_OPTIONS)
    answers["dietaryRestrictions"] = prompt_multi("Dietary restrictions", RESTRICTION_OPTIONS)
    answers["dietPreferences"] = prompt_multi("Diet preferences", DIET_OPTIONS)
    answers["additionalNotes"] = prompt_value("Additional notes (optional)", None)


_STEP_HANDLERS: tuple[Callable[[dict[str, Any]], None], ...] = (
    _personal_information,
    _fitness_goals,
    _preferences,
)


def collect_profile(session: PlanSession) -> UserProfile:
    """Walk the form steps, then validate the answers as one submission.

    Raises:
        ProfileValidationError: If the combined answers violate a constraint.
    """

    answers: dict[str, Any] = {}
    while True:
        console.rule(f"Step {session.step} of {len(FORM_STEPS)}: {session.step_title}")
        _STEP_HANDLERS[session.step - 1](answers)
        if session.on_last_step:
            break
        session.advance()
    return UserProfile.parse(answers)


__all__ = ["collect_profile"]
