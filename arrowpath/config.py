"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from arrowpath.types.styles import RenderMode


class Settings(BaseSettings):
    """Arrow rendering settings loaded from environment variables.

    Priority: environment variables > .env file > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="ARROWPATH_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Geometry
    corner_radius: float = 40.0  # max smoothing distance at a joint
    pointer_length: float = 10.0  # chevron wing length
    pointer_angle_degrees: float = 30.0  # chevron wing angle off the reversed heading

    # Stroke
    arrow_color: str = "#FFFFFF"
    arrow_stroke_width: float = 1.0
    arrow_hovered_stroke_width: float = 2.0
    arrow_hit_stroke_width: float = 5.0
    render_mode: RenderMode = RenderMode.COMPOSITE

    # Raster output
    canvas_width: int = 800
    canvas_height: int = 600
    background_color: str = "#1a1a2e"
    curve_steps_per_unit: float = 0.5  # interpolation density when flattening curves


settings = Settings()
