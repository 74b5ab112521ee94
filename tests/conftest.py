import os
from pathlib import Path
import sys
from typing import Any, Dict

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep litellm from fetching its model cost map over the network at import time;
# the background retry thread deadlocks against pytest's collection imports offline.
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

from fitplan.core import logging_setup  # noqa: E402
from fitplan.services.config_service import ConfigService  # noqa: E402
from tests.helpers.config import write_config  # noqa: E402


@pytest.fixture()
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = write_config(tmp_path / "config")
    monkeypatch.setenv("FITPLAN_CONFIG_PATH", str(directory))
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    ConfigService.clear_cache()
    return directory


@pytest.fixture()
def config_service(config_dir: Path) -> ConfigService:
    return ConfigService(config_path=config_dir)


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(logging_setup, "_configured", False, raising=False)
    monkeypatch.setattr(logging_setup, "_handler", None, raising=False)


@pytest.fixture()
def profile_payload() -> Dict[str, Any]:
    return {
        "age": 34,
        "gender": "female",
        "heightFeet": "5",
        "heightInches": "7",
        "weight": 62,
        "goal": "muscle_gain",
        "activityLevel": "very_active",
        "workoutExperience": "intermediate",
        "availableTime": "45 minutes",
        "availableCookTime": "30 minutes",
        "equipment": ["dumbbells", "kettlebell"],
        "dietPreferences": ["high_protein"],
        "dietaryRestrictions": ["gluten_free"],
        "additionalNotes": "Recovering from a knee injury",
    }
