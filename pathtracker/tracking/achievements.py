"""
Achievement evaluator - Unlock achievements whose conditions now hold.

Unlocking is one-way: achievements that already carry an unlock time are
never re-evaluated, so later regressions (for example newly added units
lowering a stage to below 100%) cannot revoke them.
"""

import logging
from datetime import datetime
from typing import Optional

from pathtracker.schemas import (
    AchievementCondition,
    CompleteStageCondition,
    CompleteUnitsCondition,
    LearningUnit,
    ProgressStats,
    ProgressTracker,
    ScoreAverageCondition,
    STREAK_MIN_COMPLETIONS,
    StreakDaysCondition,
    TotalTimeCondition,
    as_utc,
    resolve_now,
)

from .stats import get_progress_stats

logger = logging.getLogger(__name__)


def count_recent_completions(units: list[LearningUnit], days: int, now: datetime) -> int:
    """Completed units whose completion is at most `days` whole days old."""
    now = resolve_now(now)
    count = 0
    for unit in units:
        if not unit.is_completed or unit.completed_at is None:
            continue
        if (now - as_utc(unit.completed_at)).days <= days:
            count += 1
    return count


def evaluate_condition(
    condition: AchievementCondition,
    units: list[LearningUnit],
    stats: ProgressStats,
    now: datetime,
) -> bool:
    """Check one unlock condition against the current units and statistics."""
    if isinstance(condition, CompleteUnitsCondition):
        completed = [
            u for u in units
            if u.is_completed and (condition.unit_type is None or u.unit_type == condition.unit_type)
        ]
        return len(completed) >= condition.count

    if isinstance(condition, CompleteStageCondition):
        return stats.stage_progress.get(condition.stage, 0.0) >= 100.0

    if isinstance(condition, ScoreAverageCondition):
        if stats.average_score is None:
            return False
        return (
            stats.average_score >= condition.min_score
            and stats.scored_units >= condition.unit_count
        )

    if isinstance(condition, StreakDaysCondition):
        # Approximation: enough completions inside the window, not consecutive days
        return count_recent_completions(units, condition.days, now) >= STREAK_MIN_COMPLETIONS

    if isinstance(condition, TotalTimeCondition):
        return stats.completed_hours >= condition.hours

    raise TypeError(f"Unknown achievement condition: {condition!r}")


def check_achievements(
    tracker: ProgressTracker,
    stats: Optional[ProgressStats] = None,
    now: Optional[datetime] = None,
) -> list[str]:
    """
    Unlock every locked achievement whose condition is satisfied.

    Args:
        tracker: Tracker whose achievements are updated in place
        stats: Precomputed statistics (computed from the tracker if omitted)
        now: Evaluation time, also used as the unlock timestamp

    Returns:
        IDs unlocked by this call, in achievement storage order
    """
    if stats is None:
        stats = get_progress_stats(tracker)
    now = resolve_now(now)

    newly_unlocked = []
    for achievement in tracker.achievements:
        if achievement.is_unlocked:
            continue
        if not evaluate_condition(achievement.condition, tracker.learning_units, stats, now):
            continue
        if tracker.unlock_achievement(achievement.id, now=now):
            logger.info(f"Achievement unlocked for {tracker.learner_id}: {achievement.id}")
            newly_unlocked.append(achievement.id)

    return newly_unlocked
