"""Static placeholder content for the dashboard and progress analysis views.

Nothing here is computed from user data; both views are illustrative.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple


@dataclass(slots=True, frozen=True)
class Metric:
    title: str
    value: str
    color: str


@dataclass(slots=True, frozen=True)
class QuickAction:
    title: str
    path: str
    icon: str


@dataclass(slots=True, frozen=True)
class ProgressPoint:
    month: str
    weight: float
    target: float

    @property
    def bar_ratio(self) -> float:
        """Bar height relative to the first month's starting weight."""

        return self.weight / PROGRESS_DATA[0].weight


@dataclass(slots=True, frozen=True)
class TrendStat:
    title: str
    value: str
    trend: str


METRICS: Tuple[Metric, ...] = (
    Metric("Current Plan", "Active", "green"),
    Metric("Workouts Completed", "12", "blue"),
    Metric("Calories Burned", "2,450", "purple"),
    Metric("Progress", "75%", "yellow"),
)

QUICK_ACTIONS: Tuple[QuickAction, ...] = (
    QuickAction("Generate New Plan", "/generate-plan", "📝"),
    QuickAction("View Progress", "/analysis", "📊"),
    QuickAction("Update Profile", "/profile", "👤"),
)

PROGRESS_DATA: Tuple[ProgressPoint, ...] = (
    ProgressPoint("Jan", 80, 75),
    ProgressPoint("Feb", 78, 75),
    ProgressPoint("Mar", 76, 75),
    ProgressPoint("Apr", 75, 75),
)

TREND_STATS: Tuple[TrendStat, ...] = (
    TrendStat("Average Workout Duration", "45 min", "+5%"),
    TrendStat("Calories Burned", "12,500", "+8%"),
    TrendStat("Workouts Completed", "48", "+12%"),
    TrendStat("Success Rate", "92%", "+3%"),
)

RECOMMENDATIONS: Tuple[str, ...] = (
    "Increase cardio sessions to 4 times per week",
    "Add more protein to your diet",
    "Consider adding HIIT workouts",
)


def dashboard_overview() -> Dict[str, List[Dict[str, Any]]]:
    return {
        "metrics": [asdict(metric) for metric in METRICS],
        "quick_actions": [asdict(action) for action in QUICK_ACTIONS],
    }


def progress_analysis() -> Dict[str, List[Any]]:
    return {
        "progress": [
            {**asdict(point), "bar_ratio": round(point.bar_ratio, 4)}
            for point in PROGRESS_DATA
        ],
        "stats": [asdict(stat) for stat in TREND_STATS],
        "recommendations": list(RECOMMENDATIONS),
    }
