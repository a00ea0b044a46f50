"""
Curriculum schemas for pathtracker.

Defines the fixed vocabulary of the curriculum:
- Learning stages (ordered curriculum phases)
- Learning unit types with their progress weights
"""

from enum import Enum


# -----------------------------------------------------------------------------
# Learning stages
# -----------------------------------------------------------------------------

# display name, description, estimated weeks
STAGE_INFO = {
    "stage1_basics": (
        "Stage 1: Basics",
        "Rust syntax, environment setup, primitive types and control flow",
        3,
    ),
    "stage2_ownership": (
        "Stage 2: Ownership",
        "Rust's core model: ownership, borrowing and lifetimes",
        2,
    ),
    "stage3_advanced": (
        "Stage 3: Advanced Concepts",
        "Structs, enums, error handling, generics and traits",
        2,
    ),
    "stage4_ecosystem": (
        "Stage 4: Ecosystem",
        "Cargo, common crates, async programming and web frameworks",
        2,
    ),
    "stage5_projects": (
        "Stage 5: Projects",
        "Real projects: web applications, systems programming, blockchain",
        3,
    ),
}


class LearningStage(str, Enum):
    """Curriculum stages, declared in curriculum order."""
    STAGE1_BASICS = "stage1_basics"
    STAGE2_OWNERSHIP = "stage2_ownership"
    STAGE3_ADVANCED = "stage3_advanced"
    STAGE4_ECOSYSTEM = "stage4_ecosystem"
    STAGE5_PROJECTS = "stage5_projects"

    @classmethod
    def all_stages(cls) -> list["LearningStage"]:
        """All stages in curriculum order."""
        return list(cls)

    @property
    def order(self) -> int:
        """Zero-based position in the curriculum."""
        return list(LearningStage).index(self)

    @property
    def display_name(self) -> str:
        return STAGE_INFO[self.value][0]

    @property
    def description(self) -> str:
        return STAGE_INFO[self.value][1]

    @property
    def estimated_weeks(self) -> int:
        return STAGE_INFO[self.value][2]


# -----------------------------------------------------------------------------
# Learning unit types
# -----------------------------------------------------------------------------

# Contribution of each unit type to overall progress; must sum to 1.0
UNIT_TYPE_WEIGHTS = {
    "content_reading": 0.15,
    "code_example": 0.25,
    "exercise": 0.30,
    "project": 0.20,
    "assessment": 0.10,
}

UNIT_TYPE_NAMES = {
    "content_reading": "Reading",
    "code_example": "Code Example",
    "exercise": "Exercise",
    "project": "Project",
    "assessment": "Assessment",
}


class LearningUnitType(str, Enum):
    CONTENT_READING = "content_reading"
    CODE_EXAMPLE = "code_example"
    EXERCISE = "exercise"
    PROJECT = "project"
    ASSESSMENT = "assessment"

    @property
    def weight(self) -> float:
        """Weight used in the overall progress aggregation."""
        return UNIT_TYPE_WEIGHTS[self.value]

    @property
    def display_name(self) -> str:
        return UNIT_TYPE_NAMES[self.value]
