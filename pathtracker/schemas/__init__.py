"""
pathtracker Schemas - Pydantic models for learning progress tracking.

This module exports all schema classes for:
- Curriculum: learning stages and unit types with their weights
- Progress: units, status machine, tracker aggregate, derived views
- Achievement: rarity tiers, unlock conditions, achievement records
- Dashboard: renderer configuration and theme
"""

# Curriculum schemas
from .curriculum import (
    LearningStage,
    LearningUnitType,
    STAGE_INFO,
    UNIT_TYPE_WEIGHTS,
)

# Achievement schemas
from .achievement import (
    AchievementRarity,
    CompleteUnitsCondition,
    CompleteStageCondition,
    ScoreAverageCondition,
    StreakDaysCondition,
    TotalTimeCondition,
    AchievementCondition,
    Achievement,
    STREAK_MIN_COMPLETIONS,
    describe_condition,
)

# Progress schemas
from .progress import (
    LearningUnitStatus,
    LearningUnit,
    ProgressStats,
    LearningPathRecommendation,
    ProgressTracker,
    StatusTransitionError,
    normalize_score,
)

# Timestamps
from .timestamps import (
    UtcDatetime,
    as_utc,
    resolve_now,
    utc_now,
)

# Dashboard schemas
from .dashboard import (
    DashboardTheme,
    DashboardConfig,
)

__all__ = [
    # Curriculum
    'LearningStage',
    'LearningUnitType',
    'STAGE_INFO',
    'UNIT_TYPE_WEIGHTS',
    # Achievement
    'AchievementRarity',
    'CompleteUnitsCondition',
    'CompleteStageCondition',
    'ScoreAverageCondition',
    'StreakDaysCondition',
    'TotalTimeCondition',
    'AchievementCondition',
    'Achievement',
    'STREAK_MIN_COMPLETIONS',
    'describe_condition',
    # Progress
    'LearningUnitStatus',
    'LearningUnit',
    'ProgressStats',
    'LearningPathRecommendation',
    'ProgressTracker',
    'StatusTransitionError',
    'normalize_score',
    # Timestamps
    'UtcDatetime',
    'as_utc',
    'resolve_now',
    'utc_now',
    # Dashboard
    'DashboardTheme',
    'DashboardConfig',
]
