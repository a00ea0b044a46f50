"""
Dashboard rendering tests for pathtracker.
"""

from datetime import datetime, timedelta, timezone

import pytest

from pathtracker.schemas import DashboardConfig, DashboardTheme
from pathtracker.tracking import check_achievements
from pathtracker.viewer import (
    collect_dashboard_data,
    create_progress_bar,
    format_datetime,
    get_dashboard_css,
    render_html_report,
    render_html_sections,
    render_progress_bar,
    render_text_report,
    render_text_sections,
)


ALL_SECTIONS = [
    "header",
    "overall_progress",
    "stage_breakdown",
    "achievements",
    "recommendations",
    "suggestions",
    "footer",
]

TOGGLES = {
    "show_progress_bars": "overall_progress",
    "show_stage_breakdown": "stage_breakdown",
    "show_achievements": "achievements",
    "show_recommendations": "recommendations",
    "show_suggestions": "suggestions",
}


@pytest.fixture
def data(seeded_tracker, now):
    seeded_tracker.complete_unit("stage1-environment", score=92, now=now)
    seeded_tracker.start_unit("stage1-syntax", now=now)
    check_achievements(seeded_tracker, now=now)
    return collect_dashboard_data(seeded_tracker)


class TestProgressBar:
    """Test the unicode progress bar."""

    def test_half(self):
        assert create_progress_bar(50.0, 10) == "[█████░░░░░] 50.0%"

    def test_rounding(self):
        bar = create_progress_bar(27.27, 40)
        assert bar.count("█") == 11
        assert bar.count("░") == 29
        assert bar.endswith("27.3%")

    def test_bounds(self):
        assert create_progress_bar(0.0, 8).count("█") == 0
        assert create_progress_bar(100.0, 8).count("█") == 8
        assert create_progress_bar(150.0, 8).count("█") == 8

    def test_html_bar_width(self):
        assert 'style="width: 54.5%"' in render_progress_bar(54.545)
        assert 'style="width: 100.0%"' in render_progress_bar(120.0)


class TestFormatDatetime:
    """Test timestamp display."""

    def test_utc(self, now):
        assert format_datetime(now) == "2024-01-15 12:00:00 UTC"

    def test_other_offset_converted(self):
        cest = timezone(timedelta(hours=2))
        assert format_datetime(datetime(2024, 1, 15, 14, 0, tzinfo=cest)) == "2024-01-15 12:00:00 UTC"

    def test_naive_taken_as_utc(self):
        assert format_datetime(datetime(2024, 1, 15, 12, 0)) == "2024-01-15 12:00:00 UTC"


class TestDashboardData:
    """Test data collection for renderers."""

    def test_collect(self, data):
        assert data.learner_name == "Ada Lovelace"
        assert data.stats.completed_units == 1
        assert [a.id for a in data.unlocked_achievements] == ["first_steps"]
        assert len(data.locked_achievements) == 5
        assert data.recommendation.next_units
        assert data.suggestions


class TestTextReport:
    """Test the terminal report."""

    def test_all_sections(self, data):
        sections = render_text_sections(data, DashboardConfig())
        assert [name for name, _ in sections] == ALL_SECTIONS

    def test_content(self, data):
        report = render_text_report(data)
        assert "Learner: Ada Lovelace" in report
        assert "2024-01-15 12:00:00 UTC" in report
        assert "Stage 1: Basics" in report
        assert "Stage 5: Projects" in report
        assert "✅ Environment Setup and Configuration [92]" in report
        assert "🔄 Basic Syntax and Data Types" in report
        assert "First Steps" in report
        assert "🔒 Locked: 5" in report
        assert "Average score: 92.0" in report

    @pytest.mark.parametrize("toggle,section", list(TOGGLES.items()))
    def test_toggle_removes_one_section(self, data, toggle, section):
        config = DashboardConfig(**{toggle: False})
        names = [name for name, _ in render_text_sections(data, config)]
        assert names == [s for s in ALL_SECTIONS if s != section]

        full = dict(render_text_sections(data, DashboardConfig()))
        del full[section]
        assert dict(render_text_sections(data, config)) == full

    def test_progress_bar_width(self, data):
        report = render_text_report(data, DashboardConfig(progress_bar_width=20))
        # 27.27% of 20 cells
        assert "[" + "█" * 5 + "░" * 15 + "]" in report

    def test_max_recommendations(self, data):
        report = render_text_report(data, DashboardConfig(max_recommendations=1))
        assert "  1. " in report
        assert "  2. " not in report

        report = render_text_report(data, DashboardConfig(max_recommendations=0))
        assert "📚 Units:" not in report

    def test_completed_curriculum(self, seeded_tracker, now):
        for unit in seeded_tracker.learning_units:
            seeded_tracker.complete_unit(unit.id, now=now)
        report = render_text_report(collect_dashboard_data(seeded_tracker))
        assert "🎉 Congratulations!" in report


class TestHtmlReport:
    """Test the standalone HTML report."""

    def test_document(self, data):
        document = render_html_report(data)
        assert document.startswith("<!DOCTYPE html>")
        assert "<style>" in document
        assert document.rstrip().endswith("</html>")
        for section_id in ("overall-progress", "stage-breakdown", "achievements",
                           "recommendations", "suggestions"):
            assert f'id="{section_id}"' in document

    @pytest.mark.parametrize("toggle,section", list(TOGGLES.items()))
    def test_toggle_removes_one_section(self, data, toggle, section):
        config = DashboardConfig(**{toggle: False})
        names = [name for name, _ in render_html_sections(data, config)]
        assert names == [s for s in ALL_SECTIONS if s != section]

        full = dict(render_html_sections(data, DashboardConfig()))
        del full[section]
        assert dict(render_html_sections(data, config)) == full

    def test_toggle_omits_markup(self, data):
        document = render_html_report(data, DashboardConfig(show_achievements=False))
        assert 'id="achievements"' not in document
        assert 'id="suggestions"' in document

    def test_escapes_learner_name(self, seeded_tracker):
        seeded_tracker.learner_name = "<script>alert(1)</script>"
        document = render_html_report(collect_dashboard_data(seeded_tracker))
        assert "<script>alert(1)</script>" not in document
        assert "&lt;script&gt;" in document

    def test_theme_colors(self):
        css = get_dashboard_css(DashboardTheme(primary_color="#6f42c1"))
        assert "#6f42c1" in css

    def test_rarity_color(self, data):
        document = render_html_report(data)
        assert "Common" in document
        assert "#9CA3AF" in document
