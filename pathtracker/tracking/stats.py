"""
Statistics engine - Aggregate progress metrics over a unit collection.

Pure fold over the units; never raises for empty or partial data.
"""

from typing import Iterable

from pathtracker.schemas import (
    LearningStage,
    LearningUnit,
    LearningUnitStatus,
    ProgressStats,
    ProgressTracker,
)


def weighted_progress(units: list[LearningUnit]) -> float:
    """
    Overall progress percentage weighted by unit type.

    Formula: sum(weight of completed units) / sum(weight of all units) * 100.
    Returns 0.0 when there is nothing to weigh.
    """
    total_weight = sum(u.unit_type.weight for u in units)
    if total_weight <= 0:
        return 0.0
    completed_weight = sum(u.unit_type.weight for u in units if u.is_completed)
    return completed_weight / total_weight * 100.0


def stage_completion(units: list[LearningUnit]) -> dict[LearningStage, float]:
    """Percentage of completed units per stage, for stages that have units."""
    result = {}
    for stage in LearningStage.all_stages():
        stage_units = [u for u in units if u.stage == stage]
        if not stage_units:
            continue
        completed = sum(1 for u in stage_units if u.is_completed)
        result[stage] = completed / len(stage_units) * 100.0
    return result


def find_current_stage(units: list[LearningUnit]) -> LearningStage:
    """First stage holding a unit that is not completed, else the last stage."""
    stages = LearningStage.all_stages()
    for stage in stages:
        if any(u.stage == stage and not u.is_completed for u in units):
            return stage
    return stages[-1]


def compute_progress_stats(units: Iterable[LearningUnit]) -> ProgressStats:
    """Compute ProgressStats from a unit collection."""
    units = list(units)
    completed = [u for u in units if u.is_completed]
    scores = [u.score for u in completed if u.score is not None]

    return ProgressStats(
        total_units=len(units),
        completed_units=len(completed),
        in_progress_units=sum(1 for u in units if u.status == LearningUnitStatus.IN_PROGRESS),
        skipped_units=sum(1 for u in units if u.status == LearningUnitStatus.SKIPPED),
        scored_units=len(scores),
        overall_progress=weighted_progress(units),
        total_time_minutes=sum(u.estimated_time_minutes for u in units),
        completed_time_minutes=sum(u.estimated_time_minutes for u in completed),
        average_score=sum(scores) / len(scores) if scores else None,
        current_stage=find_current_stage(units),
        stage_progress=stage_completion(units),
    )


def get_progress_stats(tracker: ProgressTracker) -> ProgressStats:
    """Compute ProgressStats for a tracker's units."""
    return compute_progress_stats(tracker.learning_units)
