"""
Achievement evaluator tests for pathtracker.
"""

import json
from datetime import timedelta

from pathtracker.schemas import (
    Achievement,
    AchievementRarity,
    CompleteUnitsCondition,
    LearningStage,
    LearningUnitType,
    ProgressTracker,
    ScoreAverageCondition,
    StreakDaysCondition,
    TotalTimeCondition,
)
from pathtracker.tracking import (
    check_achievements,
    count_recent_completions,
    evaluate_condition,
    get_progress_stats,
    tracker_from_json,
    tracker_to_json,
)


def make_achievement(achievement_id, condition):
    return Achievement(
        id=achievement_id,
        name=achievement_id.title(),
        description="test",
        icon="🏅",
        condition=condition,
        rarity=AchievementRarity.RARE,
    )


class TestCheckAchievements:
    """Test unlocking through the default achievement set."""

    def test_first_completion_unlocks_first_steps(self, seeded_tracker, now):
        seeded_tracker.complete_unit("stage1-environment", now=now)
        assert check_achievements(seeded_tracker, now=now) == ["first_steps"]
        assert seeded_tracker.get_achievement("first_steps").unlocked_at == now

    def test_second_completion_does_not_unlock_again(self, seeded_tracker, now):
        seeded_tracker.complete_unit("stage1-environment", now=now)
        check_achievements(seeded_tracker, now=now)

        later = now + timedelta(hours=1)
        seeded_tracker.complete_unit("stage1-syntax", now=later)
        assert check_achievements(seeded_tracker, now=later) == []
        assert seeded_tracker.get_achievement("first_steps").unlocked_at == now

    def test_idempotent(self, seeded_tracker, now):
        seeded_tracker.complete_unit("stage1-environment", now=now)
        assert check_achievements(seeded_tracker, now=now)
        assert check_achievements(seeded_tracker, now=now) == []

    def test_nothing_completed(self, seeded_tracker, now):
        assert check_achievements(seeded_tracker, now=now) == []
        assert seeded_tracker.unlocked_achievements() == []

    def test_storage_order(self, seeded_tracker, now):
        for unit in seeded_tracker.learning_units:
            seeded_tracker.complete_unit(unit.id, now=now)
        assert check_achievements(seeded_tracker, now=now) == [
            "first_steps",
            "stage1_master",
            "steady_learner",
        ]

    def test_unlock_survives_new_units(self, seeded_tracker, now, unit_factory):
        for unit in seeded_tracker.learning_units:
            seeded_tracker.complete_unit(unit.id, now=now)
        check_achievements(seeded_tracker, now=now)

        seeded_tracker.add_unit(unit_factory("stage1-extra"))
        stats = get_progress_stats(seeded_tracker)
        assert stats.stage_progress[LearningStage.STAGE1_BASICS] < 100.0

        assert check_achievements(seeded_tracker, now=now) == []
        assert seeded_tracker.get_achievement("stage1_master").is_unlocked

    def test_empty_tracker(self, now):
        tracker = ProgressTracker(learner_id="t", learner_name="T")
        assert check_achievements(tracker, now=now) == []


class TestConditions:
    """Test each condition kind."""

    def test_complete_units_by_type(self, abc_tracker, now):
        condition = CompleteUnitsCondition(count=1, unit_type=LearningUnitType.CODE_EXAMPLE)
        abc_tracker.complete_unit("A", now=now)
        stats = get_progress_stats(abc_tracker)
        assert not evaluate_condition(condition, abc_tracker.learning_units, stats, now)

        abc_tracker.complete_unit("C", now=now)
        stats = get_progress_stats(abc_tracker)
        assert evaluate_condition(condition, abc_tracker.learning_units, stats, now)

    def test_score_average(self, unit_factory, now):
        tracker = ProgressTracker(
            learner_id="t",
            learner_name="T",
            learning_units=[unit_factory(f"u{i}") for i in range(6)],
            achievements=[
                make_achievement("scholar", ScoreAverageCondition(min_score=90, unit_count=5)),
            ],
        )
        for i in range(4):
            tracker.complete_unit(f"u{i}", score=95, now=now)
        assert check_achievements(tracker, now=now) == []

        tracker.complete_unit("u4", score=90, now=now)
        assert check_achievements(tracker, now=now) == ["scholar"]

    def test_score_average_too_low(self, unit_factory, now):
        tracker = ProgressTracker(
            learner_id="t",
            learner_name="T",
            learning_units=[unit_factory(f"u{i}") for i in range(5)],
            achievements=[
                make_achievement("scholar", ScoreAverageCondition(min_score=90, unit_count=5)),
            ],
        )
        for i in range(5):
            tracker.complete_unit(f"u{i}", score=80, now=now)
        assert check_achievements(tracker, now=now) == []

    def test_total_time(self, unit_factory, now):
        tracker = ProgressTracker(
            learner_id="t",
            learner_name="T",
            learning_units=[unit_factory("long", minutes=2990), unit_factory("short", minutes=10)],
            achievements=[make_achievement("investor", TotalTimeCondition(hours=50))],
        )
        tracker.complete_unit("long", now=now)
        assert check_achievements(tracker, now=now) == []

        tracker.complete_unit("short", now=now)
        assert check_achievements(tracker, now=now) == ["investor"]

    def test_streak_window(self, unit_factory, now):
        tracker = ProgressTracker(
            learner_id="t",
            learner_name="T",
            learning_units=[unit_factory(f"u{i}") for i in range(3)],
            achievements=[make_achievement("streak", StreakDaysCondition(days=7))],
        )
        tracker.complete_unit("u0", now=now - timedelta(days=10))
        tracker.complete_unit("u1", now=now - timedelta(days=2))
        tracker.complete_unit("u2", now=now)
        assert count_recent_completions(tracker.learning_units, 7, now) == 2
        assert check_achievements(tracker, now=now) == []

    def test_streak_counts_whole_days(self, unit_factory, now):
        units = [unit_factory("u0")]
        tracker = ProgressTracker(learner_id="t", learner_name="T", learning_units=units)
        tracker.complete_unit("u0", now=now - timedelta(days=7, hours=23))
        assert count_recent_completions(tracker.learning_units, 7, now) == 1
        assert count_recent_completions(tracker.learning_units, 6, now) == 0


class TestNaiveTimestamps:
    """Naive timestamps are treated as UTC instead of breaking evaluation."""

    def test_document_with_naive_completion(self, seeded_tracker):
        document = json.loads(tracker_to_json(seeded_tracker))
        document["learning_units"][0]["status"] = "completed"
        document["learning_units"][0]["completed_at"] = "2024-01-15T12:00:00"
        tracker = tracker_from_json(json.dumps(document))

        assert check_achievements(tracker) == ["first_steps"]

    def test_naive_now_from_caller(self, unit_factory, now):
        tracker = ProgressTracker(
            learner_id="t",
            learner_name="T",
            learning_units=[unit_factory(f"u{i}") for i in range(3)],
            achievements=[make_achievement("streak", StreakDaysCondition(days=7))],
        )
        naive_now = now.replace(tzinfo=None)
        for i in range(3):
            tracker.complete_unit(f"u{i}", now=naive_now)

        assert check_achievements(tracker, now=now) == ["streak"]
        assert count_recent_completions(tracker.learning_units, 7, naive_now) == 3
