"""
HTML renderer - Standalone HTML dashboard document.

Features:
- Same sections and data as the text report, as headed cards
- Progress bars as percentage-width indicators
- Colors taken from the DashboardConfig theme
"""

import html
from typing import Optional

from pathtracker.schemas import DashboardConfig, DashboardTheme, LearningStage

from .dashboard import (
    DashboardData,
    STATUS_ICONS,
    format_datetime,
    format_score,
)


TITLE = "Learning Progress Tracker"


def get_dashboard_css(theme: DashboardTheme) -> str:
    """Get CSS styles for the dashboard, colored by the theme."""
    return f"""
    <style>
    * {{
        margin: 0;
        padding: 0;
        box-sizing: border-box;
    }}
    body {{
        font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
        line-height: 1.6;
        color: {theme.text_color};
        background: {theme.background_color};
    }}
    .container {{
        max-width: 1200px;
        margin: 0 auto;
        padding: 20px;
    }}
    .header {{
        background: {theme.primary_color};
        color: white;
        padding: 30px;
        text-align: center;
        border-radius: 15px 15px 0 0;
    }}
    .header h1 {{
        font-size: 2.2em;
        margin-bottom: 10px;
    }}
    .learner-info {{
        font-size: 1.1em;
        opacity: 0.9;
    }}
    .section {{
        margin: 30px 0;
        padding: 25px;
        background: #f8f9fa;
        border-radius: 10px;
        border-left: 5px solid {theme.primary_color};
    }}
    .section h2 {{
        color: {theme.primary_color};
        margin-bottom: 20px;
        font-size: 1.6em;
    }}
    .progress-bar {{
        background: #e9ecef;
        border-radius: 10px;
        overflow: hidden;
        height: 26px;
        position: relative;
        margin: 10px 0;
    }}
    .progress-fill {{
        background: {theme.success_color};
        height: 100%;
    }}
    .progress-text {{
        position: absolute;
        top: 50%;
        left: 50%;
        transform: translate(-50%, -50%);
        font-weight: bold;
    }}
    .stats-grid {{
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
        gap: 20px;
        margin: 20px 0;
    }}
    .stat-card {{
        background: white;
        padding: 20px;
        border-radius: 10px;
        text-align: center;
        border-top: 3px solid {theme.primary_color};
    }}
    .stat-value {{
        font-size: 2em;
        font-weight: bold;
        color: {theme.primary_color};
    }}
    .stat-label {{
        color: #666;
        font-size: 0.9em;
    }}
    .stage-block {{
        margin-bottom: 20px;
    }}
    .stage-name {{
        font-weight: 600;
    }}
    .unit-list {{
        list-style: none;
        margin-left: 1em;
    }}
    .achievement-grid {{
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
        gap: 15px;
    }}
    .achievement-card {{
        background: white;
        padding: 20px;
        border-radius: 10px;
        border-left: 4px solid {theme.warning_color};
    }}
    .achievement-name {{
        font-weight: bold;
    }}
    .achievement-rarity {{
        font-size: 0.8em;
        font-weight: 600;
    }}
    .locked-count {{
        margin-top: 15px;
        color: #666;
    }}
    .recommendation-list, .suggestion-list {{
        list-style: none;
        margin: 20px 0;
    }}
    .recommendation-item {{
        background: white;
        margin: 10px 0;
        padding: 15px;
        border-radius: 8px;
        border-left: 4px solid {theme.success_color};
    }}
    .suggestion-item {{
        background: white;
        margin: 10px 0;
        padding: 15px;
        border-radius: 8px;
        border-left: 4px solid {theme.info_color};
    }}
    .footer {{
        background: #343a40;
        color: white;
        text-align: center;
        padding: 20px;
        border-radius: 0 0 15px 15px;
        font-size: 0.9em;
    }}
    </style>
    """


def render_progress_bar(percentage: float) -> str:
    """Fractional-width progress indicator."""
    width = max(0.0, min(100.0, percentage))
    return (
        '<div class="progress-bar">'
        f'<div class="progress-fill" style="width: {width:.1f}%"></div>'
        f'<div class="progress-text">{percentage:.1f}%</div>'
        '</div>'
    )


def render_stat_card(value: str, label: str) -> str:
    return (
        '<div class="stat-card">'
        f'<div class="stat-value">{html.escape(value)}</div>'
        f'<div class="stat-label">{html.escape(label)}</div>'
        '</div>'
    )


# -----------------------------------------------------------------------------
# Sections
# -----------------------------------------------------------------------------

def render_header(data: DashboardData) -> str:
    return (
        '<div class="header">'
        f'<h1>{TITLE}</h1>'
        '<div class="learner-info">'
        f'👋 Learner: {html.escape(data.learner_name)} | '
        f'📅 Last updated: {format_datetime(data.last_updated)}'
        '</div>'
        '</div>'
    )


def render_overall_progress(data: DashboardData) -> str:
    stats = data.stats
    parts = ['<section class="section" id="overall-progress">']
    parts.append('<h2>📊 Overall Progress</h2>')
    parts.append(render_progress_bar(stats.overall_progress))
    parts.append('<div class="stats-grid">')
    parts.append(render_stat_card(str(stats.completed_units), "Completed units"))
    parts.append(render_stat_card(str(stats.in_progress_units), "In progress"))
    parts.append(render_stat_card(str(stats.total_units), "Total units"))
    parts.append(render_stat_card(format_score(stats.average_score), "Average score"))
    parts.append(render_stat_card(str(stats.completed_time_minutes), "Minutes completed"))
    parts.append('</div>')
    parts.append('</section>')
    return ''.join(parts)


def render_stage_breakdown(data: DashboardData) -> str:
    parts = ['<section class="section" id="stage-breakdown">']
    parts.append('<h2>📋 Stage Progress</h2>')
    for stage in LearningStage.all_stages():
        progress = data.stats.stage_progress.get(stage, 0.0)
        parts.append('<div class="stage-block">')
        parts.append(f'<div class="stage-name">{html.escape(stage.display_name)}</div>')
        parts.append(render_progress_bar(progress))
        units = [u for u in data.units if u.stage == stage]
        if units:
            parts.append('<ul class="unit-list">')
            for unit in units:
                score = f' [{unit.score:.0f}]' if unit.score is not None else ''
                parts.append(
                    f'<li class="unit unit-{unit.status.value}">'
                    f'{STATUS_ICONS[unit.status]} {html.escape(unit.name)}{score}</li>'
                )
            parts.append('</ul>')
        parts.append('</div>')
    parts.append('</section>')
    return ''.join(parts)


def render_achievements(data: DashboardData) -> str:
    unlocked = data.unlocked_achievements
    parts = ['<section class="section" id="achievements">']
    parts.append('<h2>🏆 Achievements</h2>')
    if unlocked:
        parts.append('<div class="achievement-grid">')
        for achievement in unlocked:
            parts.append('<div class="achievement-card">')
            parts.append(
                f'<div class="achievement-name">{html.escape(achievement.icon)} '
                f'{html.escape(achievement.name)}</div>'
            )
            parts.append(
                f'<div class="achievement-rarity" style="color: {achievement.rarity.color}">'
                f'{achievement.rarity.display_name}</div>'
            )
            parts.append(f'<div>{html.escape(achievement.description)}</div>')
            parts.append('</div>')
        parts.append('</div>')
    else:
        parts.append('<p>No achievements unlocked yet.</p>')
    parts.append(f'<div class="locked-count">🔒 Locked: {len(data.locked_achievements)}</div>')
    parts.append('</section>')
    return ''.join(parts)


def render_recommendations(data: DashboardData, config: DashboardConfig) -> str:
    recommendation = data.recommendation
    parts = ['<section class="section" id="recommendations">']
    parts.append('<h2>🎯 Recommended Next Steps</h2>')
    parts.append(f'<p>{html.escape(recommendation.reasoning)}</p>')

    if recommendation.next_units:
        parts.append(
            f'<p>📅 Estimated time: {recommendation.estimated_time_minutes} minutes | '
            f'🎯 Confidence: {recommendation.confidence_score * 100:.0f}%</p>'
        )
        shown = recommendation.next_units[:config.max_recommendations]
        if shown:
            parts.append('<ol class="recommendation-list">')
            for unit in shown:
                parts.append(
                    '<li class="recommendation-item">'
                    f'<strong>{html.escape(unit.name)}</strong> '
                    f'({unit.unit_type.display_name} - {unit.estimated_time_minutes} minutes)'
                    '</li>'
                )
            parts.append('</ol>')

    parts.append('</section>')
    return ''.join(parts)


def render_suggestions(data: DashboardData) -> str:
    parts = ['<section class="section" id="suggestions">']
    parts.append('<h2>💡 Suggestions</h2>')
    parts.append('<ul class="suggestion-list">')
    for suggestion in data.suggestions:
        parts.append(f'<li class="suggestion-item">{html.escape(suggestion)}</li>')
    parts.append('</ul>')
    parts.append('</section>')
    return ''.join(parts)


def render_footer() -> str:
    return f'<div class="footer">{TITLE} - make progress visible.</div>'


# -----------------------------------------------------------------------------
# Full document
# -----------------------------------------------------------------------------

def render_html_sections(data: DashboardData, config: DashboardConfig) -> list[tuple[str, str]]:
    """Ordered (section name, HTML) pairs for the enabled sections."""
    sections = [("header", render_header(data))]
    if config.show_progress_bars:
        sections.append(("overall_progress", render_overall_progress(data)))
    if config.show_stage_breakdown:
        sections.append(("stage_breakdown", render_stage_breakdown(data)))
    if config.show_achievements:
        sections.append(("achievements", render_achievements(data)))
    if config.show_recommendations:
        sections.append(("recommendations", render_recommendations(data, config)))
    if config.show_suggestions:
        sections.append(("suggestions", render_suggestions(data)))
    sections.append(("footer", render_footer()))
    return sections


def render_html_report(data: DashboardData, config: Optional[DashboardConfig] = None) -> str:
    """
    Render the dashboard as a complete HTML document.

    Args:
        data: Collected dashboard data
        config: Section toggles and theme (default: everything on)

    Returns:
        HTML string
    """
    config = config or DashboardConfig()
    parts = [
        '<!DOCTYPE html>\n<html lang="en">\n<head>\n',
        '<meta charset="UTF-8">\n',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n',
        f'<title>{TITLE}</title>\n',
        get_dashboard_css(config.theme),
        '</head>\n<body>\n<div class="container">\n',
    ]
    for _, chunk in render_html_sections(data, config):
        parts.append(chunk)
        parts.append('\n')
    parts.append('</div>\n</body>\n</html>\n')
    return ''.join(parts)
