"""Unified configuration loaded from .folio.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

from folio.rendering.models import RenderOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".folio.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
]
GLOBAL_CONFIG = Path.home() / ".config" / "folio" / "config.toml"


class ContentSectionConfig(BaseModel):
    """[content] section."""

    posts_dir: str = "content/blog"
    talks_dir: str = "content/speaking"


class RenderSectionConfig(BaseModel):
    """[render] section."""

    show_time: bool = False
    timezone: str = "UTC"


class OutputSectionConfig(BaseModel):
    """[output] section."""

    format: str = "html"


class FolioConfig(BaseModel):
    """Top-level configuration."""

    content: ContentSectionConfig = Field(default_factory=ContentSectionConfig)
    render: RenderSectionConfig = Field(default_factory=RenderSectionConfig)
    output: OutputSectionConfig = Field(default_factory=OutputSectionConfig)

    def to_render_options(self) -> RenderOptions:
        """Convert the [render] section to RenderOptions."""
        return RenderOptions(
            show_time=self.render.show_time,
            timezone=self.render.timezone,
        )


def load_config(path: str | Path | None = None) -> FolioConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .folio.toml in CWD
    3. ~/.config/folio/config.toml

    Then overlay environment variables.

    Args:
        path: Explicit path to a TOML file.

    Returns:
        Merged FolioConfig.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        if not data and GLOBAL_CONFIG.exists():
            data = _load_toml(GLOBAL_CONFIG)
            logger.info("Loaded config from %s", GLOBAL_CONFIG)

    config = FolioConfig.model_validate(data) if data else FolioConfig()
    return _apply_env_vars(config)


def merge_cli_overrides(config: FolioConfig, **cli_kwargs: object) -> FolioConfig:
    """Overlay explicitly-set CLI flags onto the config.

    Only overrides values where the CLI flag was explicitly provided
    (i.e., not None).
    """
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "posts_dir": ("content", "posts_dir"),
        "talks_dir": ("content", "talks_dir"),
        "show_time": ("render", "show_time"),
        "timezone": ("render", "timezone"),
        "output_format": ("output", "format"),
    }

    for key, value in cli_kwargs.items():
        if value is None:
            continue
        if key in mapping:
            section, field = mapping[key]
            data[section][field] = value

    return FolioConfig.model_validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: FolioConfig) -> FolioConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "FOLIO_POSTS_DIR": ("content", "posts_dir"),
        "FOLIO_TALKS_DIR": ("content", "talks_dir"),
        "FOLIO_TIMEZONE": ("render", "timezone"),
        "FOLIO_OUTPUT_FORMAT": ("output", "format"),
    }

    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    show_time_raw = os.environ.get("FOLIO_SHOW_TIME")
    if show_time_raw is not None:
        data["render"]["show_time"] = show_time_raw.lower() in ("true", "1", "yes")

    return FolioConfig.model_validate(data)
