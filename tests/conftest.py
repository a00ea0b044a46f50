"""Shared fixtures for pathtracker tests."""

from datetime import datetime, timezone

import pytest

from pathtracker.schemas import (
    LearningStage,
    LearningUnit,
    LearningUnitType,
    ProgressTracker,
)
from pathtracker.tracking import create_tracker


NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_unit(
    unit_id: str,
    unit_type: LearningUnitType = LearningUnitType.CONTENT_READING,
    stage: LearningStage = LearningStage.STAGE1_BASICS,
    minutes: int = 60,
    **kwargs,
) -> LearningUnit:
    return LearningUnit(
        id=unit_id,
        name=f"Unit {unit_id}",
        unit_type=unit_type,
        stage=stage,
        estimated_time_minutes=minutes,
        **kwargs,
    )


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def abc_tracker():
    """A and B are readings, C a code example, all in stage 1."""
    return ProgressTracker(
        learner_id="test",
        learner_name="Test Learner",
        learning_units=[
            make_unit("A"),
            make_unit("B"),
            make_unit("C", LearningUnitType.CODE_EXAMPLE),
        ],
        created_at=NOW,
        last_updated=NOW,
    )


@pytest.fixture
def seeded_tracker():
    """Starter curriculum with the default achievements."""
    return create_tracker("Ada Lovelace", now=NOW)


@pytest.fixture
def full_tracker():
    return create_tracker("Ada Lovelace", curriculum="full", now=NOW)


@pytest.fixture
def unit_factory():
    return make_unit
