"""
Recommender - Pick and rank the next units to study.

Recommendations stay inside the learner's current stage:
1. Not-started units before in-progress ones
2. Heavier unit types first (exercises before readings)
3. At most MAX_RECOMMENDED_UNITS units
"""

from typing import Optional

from pathtracker.schemas import (
    LearningPathRecommendation,
    LearningUnit,
    LearningUnitStatus,
    ProgressStats,
    ProgressTracker,
)

from .stats import get_progress_stats


MAX_RECOMMENDED_UNITS = 5

COMPLETION_REASONING = (
    "Congratulations! You have finished every available learning unit. "
    "Review earlier material or start a project of your own."
)


def candidate_sort_key(unit: LearningUnit) -> tuple[int, float]:
    """Sort key: not-started first, then by unit-type weight descending."""
    started = 0 if unit.status == LearningUnitStatus.NOT_STARTED else 1
    return (started, -unit.unit_type.weight)


def get_candidate_units(tracker: ProgressTracker, stats: ProgressStats) -> list[LearningUnit]:
    """Open units of the current stage, ranked for recommendation."""
    candidates = [
        u for u in tracker.units_in_stage(stats.current_stage)
        if not u.status.is_terminal
    ]
    # sorted() is stable, so equal keys keep curriculum order
    return sorted(candidates, key=candidate_sort_key)


def compute_confidence(stats: ProgressStats) -> float:
    """Blend of overall completion ratio and current-stage completion ratio."""
    if stats.total_units == 0:
        return 0.0
    completed_ratio = stats.completed_units / stats.total_units
    stage_ratio = stats.stage_progress.get(stats.current_stage, 0.0) / 100.0
    return (completed_ratio + stage_ratio) / 2


def recommend_learning_path(
    tracker: ProgressTracker,
    stats: Optional[ProgressStats] = None,
) -> LearningPathRecommendation:
    """
    Build the learning path recommendation for a tracker.

    Args:
        tracker: Tracker to recommend for
        stats: Precomputed statistics (computed from the tracker if omitted)

    Returns:
        LearningPathRecommendation; empty with zero confidence when the
        current stage has no open units.
    """
    if stats is None:
        stats = get_progress_stats(tracker)

    next_units = get_candidate_units(tracker, stats)[:MAX_RECOMMENDED_UNITS]
    estimated_minutes = sum(u.estimated_time_minutes for u in next_units)

    if not next_units:
        return LearningPathRecommendation(
            next_units=[],
            recommended_stage=stats.current_stage,
            estimated_time_minutes=0,
            confidence_score=0.0,
            reasoning=COMPLETION_REASONING,
        )

    reasoning = (
        f"Based on your progress, work through {len(next_units)} unit(s) of "
        f"{stats.current_stage.display_name} next, about {estimated_minutes} minutes."
    )
    return LearningPathRecommendation(
        next_units=[u.model_copy(deep=True) for u in next_units],
        recommended_stage=stats.current_stage,
        estimated_time_minutes=estimated_minutes,
        confidence_score=compute_confidence(stats),
        reasoning=reasoning,
    )
