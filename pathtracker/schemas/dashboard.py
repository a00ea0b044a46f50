"""
Dashboard configuration schemas for pathtracker.

Section toggles and layout limits shared by the text and HTML renderers,
plus the color theme used only by the HTML renderer.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# "#rgb" or "#rrggbb"; theme values are written into CSS unescaped
HexColor = Annotated[str, Field(pattern=r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")]


class DashboardTheme(BaseModel):
    model_config = ConfigDict(extra="forbid")

    primary_color: HexColor = "#007bff"
    success_color: HexColor = "#28a745"
    warning_color: HexColor = "#ffc107"
    danger_color: HexColor = "#dc3545"
    info_color: HexColor = "#17a2b8"
    text_color: HexColor = "#333333"
    background_color: HexColor = "#ffffff"


class DashboardConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    show_progress_bars: bool = True    # overall progress section
    show_stage_breakdown: bool = True
    show_achievements: bool = True
    show_recommendations: bool = True
    show_suggestions: bool = True
    max_recommendations: int = Field(default=5, ge=0)
    progress_bar_width: int = Field(default=40, ge=1)
    stage_bar_width: int = Field(default=30, ge=1)
    theme: DashboardTheme = DashboardTheme()
