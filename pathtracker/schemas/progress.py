"""
Progress tracking schemas for pathtracker.

Defines Pydantic models for learner progress including:
- Unit status state machine
- Learning units and the ProgressTracker aggregate
- Derived statistics and learning path recommendations
"""

import math
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .achievement import Achievement
from .curriculum import LearningStage, LearningUnitType
from .timestamps import UtcDatetime, resolve_now, utc_now


# -----------------------------------------------------------------------------
# Unit status state machine
# -----------------------------------------------------------------------------

class LearningUnitStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"

    @property
    def display_name(self) -> str:
        return STATUS_NAMES[self.value]

    @property
    def is_terminal(self) -> bool:
        return self in (LearningUnitStatus.COMPLETED, LearningUnitStatus.SKIPPED)


STATUS_NAMES = {
    "not_started": "Not started",
    "in_progress": "In progress",
    "completed": "Completed",
    "skipped": "Skipped",
}

# target status -> statuses it may be entered from
ALLOWED_TRANSITIONS = {
    LearningUnitStatus.IN_PROGRESS: {LearningUnitStatus.NOT_STARTED},
    LearningUnitStatus.COMPLETED: {LearningUnitStatus.NOT_STARTED, LearningUnitStatus.IN_PROGRESS},
    LearningUnitStatus.SKIPPED: {LearningUnitStatus.NOT_STARTED, LearningUnitStatus.IN_PROGRESS},
}


class StatusTransitionError(ValueError):
    """Raised when a unit is moved along a transition the state machine forbids."""

    def __init__(self, unit_id: str, current: LearningUnitStatus, target: LearningUnitStatus):
        self.unit_id = unit_id
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot move unit '{unit_id}' from {current.value} to {target.value}"
        )


def normalize_score(value) -> Optional[float]:
    """
    Coerce a user-supplied score into the 0-100 range.

    Unparsable, non-finite or out-of-range values become None rather than
    raising, so a bad score never blocks completing a unit.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        score = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(score) or not 0.0 <= score <= 100.0:
        return None
    return score


# -----------------------------------------------------------------------------
# Learning unit
# -----------------------------------------------------------------------------

class LearningUnit(BaseModel):
    id: str
    name: str
    unit_type: LearningUnitType
    stage: LearningStage
    path: str = ""  # file path or URL, not interpreted
    estimated_time_minutes: int = Field(default=0, ge=0)
    status: LearningUnitStatus = LearningUnitStatus.NOT_STARTED
    started_at: Optional[UtcDatetime] = None
    completed_at: Optional[UtcDatetime] = None
    score: Optional[float] = Field(default=None, ge=0.0, le=100.0)
    notes: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == LearningUnitStatus.COMPLETED

    @property
    def actual_time_minutes(self) -> Optional[int]:
        """Minutes between start and completion, when both are known."""
        if self.started_at is None or self.completed_at is None:
            return None
        return int((self.completed_at - self.started_at).total_seconds() // 60)

    def _check_transition(self, target: LearningUnitStatus):
        if self.status not in ALLOWED_TRANSITIONS[target]:
            raise StatusTransitionError(self.id, self.status, target)


# -----------------------------------------------------------------------------
# Derived views
# -----------------------------------------------------------------------------

class ProgressStats(BaseModel):
    total_units: int = 0
    completed_units: int = 0
    in_progress_units: int = 0
    skipped_units: int = 0
    scored_units: int = 0          # completed units carrying a score
    overall_progress: float = 0.0  # 0.0 - 100.0, weighted by unit type
    total_time_minutes: int = 0
    completed_time_minutes: int = 0
    average_score: Optional[float] = None
    current_stage: LearningStage = LearningStage.STAGE1_BASICS
    stage_progress: dict[LearningStage, float] = {}  # stages without units are absent

    @property
    def completed_hours(self) -> float:
        return self.completed_time_minutes / 60


class LearningPathRecommendation(BaseModel):
    next_units: list[LearningUnit] = []
    recommended_stage: LearningStage
    estimated_time_minutes: int = 0
    confidence_score: float = Field(default=0.0, ge=0.0, le=1.0)
    reasoning: str


# -----------------------------------------------------------------------------
# Aggregate root
# -----------------------------------------------------------------------------

class ProgressTracker(BaseModel):
    """
    One learner's units and achievements.

    The tracker is the only owner of both collections: units are added and
    moved through their status machine here, and achievements are unlocked
    here. Units are never removed.
    """
    learner_id: str
    learner_name: str
    learning_units: list[LearningUnit] = []
    achievements: list[Achievement] = []
    created_at: UtcDatetime = Field(default_factory=utc_now)
    last_updated: UtcDatetime = Field(default_factory=utc_now)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_unit(self, unit_id: str) -> Optional[LearningUnit]:
        for unit in self.learning_units:
            if unit.id == unit_id:
                return unit
        return None

    def get_achievement(self, achievement_id: str) -> Optional[Achievement]:
        for achievement in self.achievements:
            if achievement.id == achievement_id:
                return achievement
        return None

    def units_in_stage(self, stage: LearningStage) -> list[LearningUnit]:
        return [u for u in self.learning_units if u.stage == stage]

    def unlocked_achievements(self) -> list[Achievement]:
        return [a for a in self.achievements if a.is_unlocked]

    def locked_achievements(self) -> list[Achievement]:
        return [a for a in self.achievements if not a.is_unlocked]

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def touch(self, now: Optional[datetime] = None):
        self.last_updated = resolve_now(now)

    def add_unit(self, unit: LearningUnit, now: Optional[datetime] = None):
        """Append a unit; unit ids are unique within a tracker."""
        if self.get_unit(unit.id) is not None:
            raise ValueError(f"Duplicate learning unit id: {unit.id}")
        self.learning_units.append(unit)
        self.touch(now)

    def start_unit(self, unit_id: str, now: Optional[datetime] = None) -> Optional[LearningUnit]:
        """
        Move a unit from not_started to in_progress.

        Returns:
            The updated unit, or None if no unit has this id.

        Raises:
            StatusTransitionError: If the unit is not in not_started.
        """
        unit = self.get_unit(unit_id)
        if unit is None:
            return None
        unit._check_transition(LearningUnitStatus.IN_PROGRESS)
        now = resolve_now(now)
        unit.status = LearningUnitStatus.IN_PROGRESS
        unit.started_at = now
        self.touch(now)
        return unit

    def complete_unit(
        self,
        unit_id: str,
        score=None,
        now: Optional[datetime] = None,
    ) -> Optional[LearningUnit]:
        """
        Complete a unit, recording an optional score.

        An invalid score is stored as no score; the unit still completes.

        Returns:
            The updated unit, or None if no unit has this id.

        Raises:
            StatusTransitionError: If the unit is already completed or skipped.
        """
        unit = self.get_unit(unit_id)
        if unit is None:
            return None
        unit._check_transition(LearningUnitStatus.COMPLETED)
        now = resolve_now(now)
        unit.status = LearningUnitStatus.COMPLETED
        unit.completed_at = now
        unit.score = normalize_score(score)
        self.touch(now)
        return unit

    def skip_unit(self, unit_id: str, now: Optional[datetime] = None) -> Optional[LearningUnit]:
        """Skip a unit. Returns None for an unknown id."""
        unit = self.get_unit(unit_id)
        if unit is None:
            return None
        unit._check_transition(LearningUnitStatus.SKIPPED)
        unit.status = LearningUnitStatus.SKIPPED
        self.touch(now)
        return unit

    def unlock_achievement(self, achievement_id: str, now: Optional[datetime] = None) -> bool:
        """
        Stamp an achievement as unlocked.

        Returns False when the id is unknown or the achievement is already
        unlocked; an existing unlock time is never overwritten.
        """
        achievement = self.get_achievement(achievement_id)
        if achievement is None or achievement.is_unlocked:
            return False
        now = resolve_now(now)
        achievement.unlocked_at = now
        self.touch(now)
        return True
