"""
Dashboard data - Everything the report renderers need, computed once.

Statistics are computed a single time and fed to the recommender and the
suggestion generator; renderers only read the resulting DashboardData.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pathtracker.schemas import (
    Achievement,
    LearningPathRecommendation,
    LearningUnit,
    LearningUnitStatus,
    ProgressStats,
    ProgressTracker,
    as_utc,
)
from pathtracker.tracking import (
    compute_progress_stats,
    generate_suggestions,
    recommend_learning_path,
)


# Status glyphs for the per-unit stage listing
STATUS_ICONS = {
    LearningUnitStatus.NOT_STARTED: "📋",
    LearningUnitStatus.IN_PROGRESS: "🔄",
    LearningUnitStatus.COMPLETED: "✅",
    LearningUnitStatus.SKIPPED: "⏭️",
}


@dataclass
class DashboardData:
    """Renderer inputs for one learner."""
    learner_name: str
    last_updated: datetime
    units: list[LearningUnit]
    achievements: list[Achievement]
    stats: ProgressStats
    recommendation: LearningPathRecommendation
    suggestions: list[str] = field(default_factory=list)

    @property
    def unlocked_achievements(self) -> list[Achievement]:
        return [a for a in self.achievements if a.is_unlocked]

    @property
    def locked_achievements(self) -> list[Achievement]:
        return [a for a in self.achievements if not a.is_unlocked]


def collect_dashboard_data(tracker: ProgressTracker) -> DashboardData:
    """Run the statistics engine once and fan it out to the other engines."""
    stats = compute_progress_stats(tracker.learning_units)
    return DashboardData(
        learner_name=tracker.learner_name,
        last_updated=tracker.last_updated,
        units=list(tracker.learning_units),
        achievements=list(tracker.achievements),
        stats=stats,
        recommendation=recommend_learning_path(tracker, stats),
        suggestions=generate_suggestions(stats),
    )


def format_datetime(dt: datetime) -> str:
    """Render an instant in UTC, whatever offset it was stored with."""
    return as_utc(dt).astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")


def format_score(score) -> str:
    return f"{score:.1f}" if score is not None else "n/a"
