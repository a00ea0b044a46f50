"""
Seed data - Default curricula and achievements for new trackers.

Two curricula are available:
- "starter": the three introductory stage-1 units
- "full": units across all five stages, following the course repository layout
"""

import re
from datetime import datetime
from typing import Optional

from pathtracker.schemas import (
    Achievement,
    AchievementRarity,
    CompleteStageCondition,
    CompleteUnitsCondition,
    LearningStage,
    LearningUnit,
    LearningUnitType,
    ProgressTracker,
    ScoreAverageCondition,
    StreakDaysCondition,
    TotalTimeCondition,
    resolve_now,
)

S1 = LearningStage.STAGE1_BASICS
S2 = LearningStage.STAGE2_OWNERSHIP
S3 = LearningStage.STAGE3_ADVANCED
S4 = LearningStage.STAGE4_ECOSYSTEM
S5 = LearningStage.STAGE5_PROJECTS

READING = LearningUnitType.CONTENT_READING
EXAMPLE = LearningUnitType.CODE_EXAMPLE
EXERCISE = LearningUnitType.EXERCISE
PROJECT = LearningUnitType.PROJECT
ASSESSMENT = LearningUnitType.ASSESSMENT


# (id, name, type, stage, path, minutes)
STARTER_UNITS = [
    ("stage1-environment", "Environment Setup and Configuration", READING, S1,
     "content/stage1-basics/01-environment", 60),
    ("stage1-syntax", "Basic Syntax and Data Types", READING, S1,
     "content/stage1-basics/02-syntax", 120),
    ("stage1-syntax-demo", "Syntax Demo Code", EXAMPLE, S1,
     "examples/stage1-basics/02-syntax-demo", 45),
]

FULL_UNITS = STARTER_UNITS + [
    ("stage1-control-flow", "Control Flow", READING, S1,
     "content/stage1-basics/03-control-flow", 90),
    ("stage1-control-flow-demo", "Control Flow Demo Code", EXAMPLE, S1,
     "examples/stage1-basics/03-control-flow-demo", 45),
    ("stage1-ownership-intro-exercise", "Ownership Intro Exercise", EXERCISE, S1,
     "exercises/stage1-basics/04-ownership-intro", 60),
    ("stage1-assessment", "Stage 1 Self Assessment", ASSESSMENT, S1,
     "assessments/stage1-basics", 30),
    ("stage2-ownership-concepts", "Ownership Concepts", EXAMPLE, S2,
     "examples/stage2-ownership/01-ownership-concepts", 90),
    ("stage2-borrowing", "Borrowing and Lifetimes", EXAMPLE, S2,
     "examples/stage2-ownership/02-borrowing-and-lifetimes", 120),
    ("stage2-ownership-exercise", "Ownership Exercise", EXERCISE, S2,
     "exercises/stage2-ownership/ownership-exercise-01", 90),
    ("stage3-pattern-matching", "Enums and Pattern Matching", EXAMPLE, S3,
     "examples/stage3-advanced/01-enums-and-pattern-matching", 90),
    ("stage3-error-handling", "Error Handling", EXAMPLE, S3,
     "examples/stage3-advanced/02-error-handling", 90),
    ("stage3-smart-pointers", "Smart Pointers", EXAMPLE, S3,
     "examples/stage3-advanced/03-smart-pointers", 120),
    ("stage4-serde-json", "Serialization with serde_json", EXAMPLE, S4,
     "examples/stage4-ecosystem/01-serde-json", 90),
    ("stage4-tokio-async", "Async Programming with Tokio", EXAMPLE, S4,
     "examples/stage4-ecosystem/02-tokio-async", 150),
    ("stage5-axum-web-app", "Web Application with Axum", PROJECT, S5,
     "examples/stage5-projects/01-axum-web-app", 600),
    ("stage5-system-cli", "Systems Programming CLI", PROJECT, S5,
     "examples/stage5-projects/02-system-programming-cli", 480),
    ("stage5-blockchain-demo", "Blockchain Demo", PROJECT, S5,
     "examples/stage5-projects/03-blockchain-demo", 480),
]

CURRICULA = {
    "starter": STARTER_UNITS,
    "full": FULL_UNITS,
}


def default_units(curriculum: str = "starter") -> list[LearningUnit]:
    """Fresh, not-started units for a named curriculum."""
    if curriculum not in CURRICULA:
        raise ValueError(
            f"Unknown curriculum '{curriculum}'. Available: {', '.join(sorted(CURRICULA))}"
        )
    return [
        LearningUnit(
            id=unit_id,
            name=name,
            unit_type=unit_type,
            stage=stage,
            path=path,
            estimated_time_minutes=minutes,
        )
        for unit_id, name, unit_type, stage, path, minutes in CURRICULA[curriculum]
    ]


def default_achievements() -> list[Achievement]:
    return [
        Achievement(
            id="first_steps",
            name="First Steps",
            description="Complete your first learning unit",
            icon="🎯",
            condition=CompleteUnitsCondition(count=1),
            rarity=AchievementRarity.COMMON,
        ),
        Achievement(
            id="stage1_master",
            name="Basics Master",
            description="Complete every unit in stage 1",
            icon="🌟",
            condition=CompleteStageCondition(stage=S1),
            rarity=AchievementRarity.RARE,
        ),
        Achievement(
            id="code_warrior",
            name="Code Warrior",
            description="Complete 10 code examples",
            icon="⚔️",
            condition=CompleteUnitsCondition(count=10, unit_type=EXAMPLE),
            rarity=AchievementRarity.EPIC,
        ),
        Achievement(
            id="perfect_student",
            name="Perfect Student",
            description="Average 90 or more across 5 scored units",
            icon="🏆",
            condition=ScoreAverageCondition(min_score=90.0, unit_count=5),
            rarity=AchievementRarity.LEGENDARY,
        ),
        Achievement(
            id="steady_learner",
            name="Steady Learner",
            description="Complete 3 units within a week",
            icon="🔥",
            condition=StreakDaysCondition(days=7),
            rarity=AchievementRarity.RARE,
        ),
        Achievement(
            id="time_investor",
            name="Time Investor",
            description="Complete 50 hours of study",
            icon="⏳",
            condition=TotalTimeCondition(hours=50),
            rarity=AchievementRarity.EPIC,
        ),
    ]


def learner_id_from_name(learner_name: str) -> str:
    """Slug a display name into a learner id ("Ada Lovelace" -> "ada-lovelace")."""
    slug = re.sub(r"\s+", "-", learner_name.strip().lower())
    return slug or "learner"


def create_tracker(
    learner_name: str,
    learner_id: Optional[str] = None,
    curriculum: str = "starter",
    now: Optional[datetime] = None,
) -> ProgressTracker:
    """
    Create a tracker seeded with a default curriculum and achievements.

    Args:
        learner_name: Display name of the learner
        learner_id: Explicit id (default: slug of the name)
        curriculum: "starter" or "full"
        now: Creation timestamp (default: current UTC time)
    """
    now = resolve_now(now)
    return ProgressTracker(
        learner_id=learner_id or learner_id_from_name(learner_name),
        learner_name=learner_name,
        learning_units=default_units(curriculum),
        achievements=default_achievements(),
        created_at=now,
        last_updated=now,
    )
