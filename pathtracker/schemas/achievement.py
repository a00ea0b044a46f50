"""
Achievement schemas for pathtracker.

Defines Pydantic models for the achievement system including:
- Rarity tiers
- Unlock conditions (tagged union on `kind`)
- Achievement records with a one-way unlock timestamp
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from .curriculum import LearningStage, LearningUnitType
from .timestamps import UtcDatetime


class AchievementRarity(str, Enum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        """Badge color for HTML display."""
        return RARITY_COLORS[self.value]


# Completions required inside the window of a streak_days condition
STREAK_MIN_COMPLETIONS = 3

RARITY_COLORS = {
    "common": "#9CA3AF",
    "rare": "#3B82F6",
    "epic": "#8B5CF6",
    "legendary": "#F59E0B",
}


# -----------------------------------------------------------------------------
# Unlock conditions
# -----------------------------------------------------------------------------

class ConditionBase(BaseModel):
    kind: str


class CompleteUnitsCondition(ConditionBase):
    """Complete `count` units, optionally only of one unit type."""
    kind: Literal["complete_units"] = "complete_units"
    count: int = Field(..., ge=1)
    unit_type: Optional[LearningUnitType] = None


class CompleteStageCondition(ConditionBase):
    kind: Literal["complete_stage"] = "complete_stage"
    stage: LearningStage


class ScoreAverageCondition(ConditionBase):
    """Average score of at least `min_score` over at least `unit_count` scored units."""
    kind: Literal["score_average"] = "score_average"
    min_score: float = Field(..., ge=0.0, le=100.0)
    unit_count: int = Field(..., ge=1)


class StreakDaysCondition(ConditionBase):
    kind: Literal["streak_days"] = "streak_days"
    days: int = Field(..., ge=1)


class TotalTimeCondition(ConditionBase):
    kind: Literal["total_time"] = "total_time"
    hours: int = Field(..., ge=1)


AchievementCondition = Annotated[
    Union[
        CompleteUnitsCondition,
        CompleteStageCondition,
        ScoreAverageCondition,
        StreakDaysCondition,
        TotalTimeCondition,
    ],
    Field(discriminator="kind"),
]


def describe_condition(condition: AchievementCondition) -> str:
    """Human-readable summary of what unlocks an achievement."""
    if isinstance(condition, CompleteUnitsCondition):
        if condition.unit_type is None:
            return f"Complete {condition.count} learning unit(s)"
        return f"Complete {condition.count} {condition.unit_type.display_name} unit(s)"
    if isinstance(condition, CompleteStageCondition):
        return f"Complete every unit in {condition.stage.display_name}"
    if isinstance(condition, ScoreAverageCondition):
        return (
            f"Average score of {condition.min_score:.0f}+ "
            f"across {condition.unit_count} scored units"
        )
    if isinstance(condition, StreakDaysCondition):
        return f"Complete {STREAK_MIN_COMPLETIONS} units within {condition.days} days"
    if isinstance(condition, TotalTimeCondition):
        return f"Complete {condition.hours} hours of study"
    raise TypeError(f"Unknown achievement condition: {condition!r}")


# -----------------------------------------------------------------------------
# Achievement record
# -----------------------------------------------------------------------------

class Achievement(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    condition: AchievementCondition
    rarity: AchievementRarity = AchievementRarity.COMMON
    unlocked_at: Optional[UtcDatetime] = None  # set once, never cleared

    @property
    def is_unlocked(self) -> bool:
        return self.unlocked_at is not None
