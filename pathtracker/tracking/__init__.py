"""
pathtracker Tracking - Engines computing over a ProgressTracker.

This module provides:
- Statistics: weighted progress and per-stage completion
- Recommender: next units to study
- Achievements: monotonic unlock evaluation
- Suggestions: personalized advice
- Seed: default curricula and tracker factory
- ProgressStore: JSON persistence
"""

from .stats import (
    compute_progress_stats,
    get_progress_stats,
    weighted_progress,
    stage_completion,
    find_current_stage,
)

from .recommender import (
    recommend_learning_path,
    get_candidate_units,
    compute_confidence,
    MAX_RECOMMENDED_UNITS,
)

from .achievements import (
    check_achievements,
    evaluate_condition,
    count_recent_completions,
)

from .suggestions import (
    generate_suggestions,
    STAGE_TIPS,
)

from .seed import (
    create_tracker,
    default_units,
    default_achievements,
    learner_id_from_name,
    CURRICULA,
)

from .store import (
    ProgressStore,
    ProgressFileError,
    ProgressFileNotFoundError,
    tracker_to_json,
    tracker_from_json,
    DEFAULT_PROGRESS_FILE,
)

__all__ = [
    # Statistics
    "compute_progress_stats",
    "get_progress_stats",
    "weighted_progress",
    "stage_completion",
    "find_current_stage",
    # Recommender
    "recommend_learning_path",
    "get_candidate_units",
    "compute_confidence",
    "MAX_RECOMMENDED_UNITS",
    # Achievements
    "check_achievements",
    "evaluate_condition",
    "count_recent_completions",
    # Suggestions
    "generate_suggestions",
    "STAGE_TIPS",
    # Seed
    "create_tracker",
    "default_units",
    "default_achievements",
    "learner_id_from_name",
    "CURRICULA",
    # Store
    "ProgressStore",
    "ProgressFileError",
    "ProgressFileNotFoundError",
    "tracker_to_json",
    "tracker_from_json",
    "DEFAULT_PROGRESS_FILE",
]
