"""
Text renderer - Terminal dashboard with unicode progress bars.

Sections, in order: header, overall progress, stage breakdown, achievements,
recommendations, suggestions, footer. Header and footer are always present;
the others follow the DashboardConfig toggles and are omitted when off.
"""

from typing import Optional

from pathtracker.schemas import DashboardConfig, LearningStage

from .dashboard import (
    DashboardData,
    STATUS_ICONS,
    format_datetime,
    format_score,
)


RULE = "━" * 80
TITLE = "Learning Progress Tracker"

RARITY_ICONS = {
    "common": "🌟",
    "rare": "⭐",
    "epic": "🌟",
    "legendary": "💫",
}


def create_progress_bar(percentage: float, width: int) -> str:
    """
    Render `[████░░░░] 50.0%`.

    Filled cells: round(percentage / 100 * width), clamped to the bar.
    """
    filled = int(round(percentage / 100 * width))
    filled = max(0, min(width, filled))
    return f"[{'█' * filled}{'░' * (width - filled)}] {percentage:.1f}%"


def section_title(icon: str, title: str) -> str:
    return f"\n{icon} {title}\n{RULE}\n"


# -----------------------------------------------------------------------------
# Sections
# -----------------------------------------------------------------------------

def render_header(data: DashboardData) -> str:
    return (
        f"┏{'━' * 78}┓\n"
        f"┃{TITLE.center(78)}┃\n"
        f"┗{'━' * 78}┛\n"
        f"\n"
        f"👋 Learner: {data.learner_name}\n"
        f"📅 Last updated: {format_datetime(data.last_updated)}\n"
    )


def render_overall_progress(data: DashboardData, config: DashboardConfig) -> str:
    stats = data.stats
    return (
        section_title("📊", "Overall Progress")
        + create_progress_bar(stats.overall_progress, config.progress_bar_width) + "\n"
        + "\n"
        + f"✅ Completed: {stats.completed_units}    "
        + f"🔄 In progress: {stats.in_progress_units}    "
        + f"⏭️ Skipped: {stats.skipped_units}    "
        + f"📋 Total: {stats.total_units}\n"
        + f"🎯 Average score: {format_score(stats.average_score)}    "
        + f"⏱️ Completed study time: {stats.completed_time_minutes} minutes\n"
    )


def render_stage_breakdown(data: DashboardData, config: DashboardConfig) -> str:
    parts = [section_title("📋", "Stage Progress")]
    for stage in LearningStage.all_stages():
        progress = data.stats.stage_progress.get(stage, 0.0)
        parts.append(f"{stage.display_name}\n")
        parts.append(create_progress_bar(progress, config.stage_bar_width) + "\n")
        for unit in data.units:
            if unit.stage != stage:
                continue
            score = f" [{unit.score:.0f}]" if unit.score is not None else ""
            parts.append(f"  {STATUS_ICONS[unit.status]} {unit.name}{score}\n")
        parts.append("\n")
    return "".join(parts)


def render_achievements(data: DashboardData) -> str:
    parts = [section_title("🏆", "Achievements")]
    unlocked = data.unlocked_achievements
    locked = data.locked_achievements

    if unlocked:
        parts.append(f"\n✨ Unlocked ({len(unlocked)}):\n")
        for achievement in unlocked:
            icon = RARITY_ICONS[achievement.rarity.value]
            parts.append(f"  {icon} {achievement.icon} {achievement.name} - {achievement.description}\n")
    else:
        parts.append("\nNo achievements unlocked yet.\n")

    parts.append(f"\n🔒 Locked: {len(locked)}\n")
    return "".join(parts)


def render_recommendations(data: DashboardData, config: DashboardConfig) -> str:
    recommendation = data.recommendation
    parts = [section_title("🎯", "Recommended Next Steps")]

    if not recommendation.next_units:
        parts.append(f"\n🎉 {recommendation.reasoning}\n")
        return "".join(parts)

    parts.append(f"\n💡 {recommendation.reasoning}\n")
    parts.append(f"📅 Estimated time: {recommendation.estimated_time_minutes} minutes\n")
    parts.append(f"🎯 Confidence: {recommendation.confidence_score * 100:.0f}%\n")

    shown = recommendation.next_units[:config.max_recommendations]
    if shown:
        parts.append("\n📚 Units:\n")
        for i, unit in enumerate(shown, start=1):
            parts.append(
                f"  {i}. {unit.name} ({unit.unit_type.display_name} - "
                f"{unit.estimated_time_minutes} minutes)\n"
            )
    return "".join(parts)


def render_suggestions(data: DashboardData) -> str:
    parts = [section_title("💡", "Suggestions")]
    for i, suggestion in enumerate(data.suggestions, start=1):
        parts.append(f"{i}. {suggestion}\n")
    return "".join(parts)


def render_footer() -> str:
    return f"\n{RULE}\n{TITLE} - make progress visible.\n"


# -----------------------------------------------------------------------------
# Full report
# -----------------------------------------------------------------------------

def render_text_sections(data: DashboardData, config: DashboardConfig) -> list[tuple[str, str]]:
    """Ordered (section name, text) pairs for the enabled sections."""
    sections = [("header", render_header(data))]
    if config.show_progress_bars:
        sections.append(("overall_progress", render_overall_progress(data, config)))
    if config.show_stage_breakdown:
        sections.append(("stage_breakdown", render_stage_breakdown(data, config)))
    if config.show_achievements:
        sections.append(("achievements", render_achievements(data)))
    if config.show_recommendations:
        sections.append(("recommendations", render_recommendations(data, config)))
    if config.show_suggestions:
        sections.append(("suggestions", render_suggestions(data)))
    sections.append(("footer", render_footer()))
    return sections


def render_text_report(data: DashboardData, config: Optional[DashboardConfig] = None) -> str:
    """Render the terminal dashboard."""
    config = config or DashboardConfig()
    return "".join(chunk for _, chunk in render_text_sections(data, config))
