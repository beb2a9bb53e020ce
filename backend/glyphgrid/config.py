"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    glyphgrid_env: str = "development"
    glyphgrid_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Dataset: header must name column0..column4
    dataset_path: str = "samples/dataset.csv"

    # Viewport used for the startup render
    viewport_width: int = 1280
    viewport_height: int = 800

    # Grid layout (shared by rendering and hit-testing)
    outer_margin: float = 30.0
    padding: float = 18.0
    item_size: float = 110.0
    glyph_scale: float = 0.9

    # Rendering
    background: str = "#120e1e"
    draw_overlay: bool = True
    noise_seed: int = 0

    # Inspection tooltips
    tooltip_seconds: float = 3.0
    tooltip_offset: float = 8.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
