"""
pathtracker Viewer - Rendering components for the progress dashboard.

This module provides:
- DashboardData collection from a tracker
- Terminal text report
- Standalone HTML report
"""

from .dashboard import (
    DashboardData,
    collect_dashboard_data,
    format_datetime,
    STATUS_ICONS,
)

from .text_report import (
    create_progress_bar,
    render_text_sections,
    render_text_report,
)

from .html_report import (
    get_dashboard_css,
    render_progress_bar,
    render_html_sections,
    render_html_report,
)

__all__ = [
    # Dashboard data
    "DashboardData",
    "collect_dashboard_data",
    "format_datetime",
    "STATUS_ICONS",
    # Text
    "create_progress_bar",
    "render_text_sections",
    "render_text_report",
    # HTML
    "get_dashboard_css",
    "render_progress_bar",
    "render_html_sections",
    "render_html_report",
]
