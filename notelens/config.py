"""
Configuration for NoteLens.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import math
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from notelens.utils.exceptions import ConfigurationError


class SimilarityConfig(BaseModel):
    """Lexical similarity configuration."""

    # Count duplicate tokens in the intersection like the legacy scorer did.
    # Order-dependent, so off by default.
    exact_parity: bool = False


class InsightConfig(BaseModel):
    """Insight detection thresholds."""

    connection_threshold: float = 0.2
    min_action_notes: int = 2
    trend_min_notes: int = 3
    trend_min_count: int = 3
    trend_min_recent: int = 2
    recent_window_days: int = 30
    trend_max_related: int = 5
    trend_relevance: float = 0.8


class MindMapConfig(BaseModel):
    """Mind map layout configuration."""

    center_label: str = "My Thoughts"
    max_categories: int = 5
    max_keywords: int = 8
    max_action_items: int = 5
    max_notes_per_category: int = 3
    note_arc: float = 0.3
    category_radius: float = 200.0
    note_radius: float = 350.0
    keyword_radius: float = 500.0
    action_radius: float = 650.0
    keyword_phase: float = math.pi / 8
    action_phase: float = math.pi / 5
    action_label_max: int = 30


class AdviceConfig(BaseModel):
    """Daily advice configuration."""

    interval_hours: float = 24.0
    top_categories: int = 3
    state_path: str | None = None  # None keeps throttle state in memory


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Config(BaseModel):
    """Main configuration."""

    similarity: SimilarityConfig = Field(default_factory=SimilarityConfig)
    insights: InsightConfig = Field(default_factory=InsightConfig)
    mindmap: MindMapConfig = Field(default_factory=MindMapConfig)
    advice: AdviceConfig = Field(default_factory=AdviceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Raises:
            ConfigurationError: If a numeric variable cannot be parsed

        Environment variables:
            NOTELENS_SIMILARITY_EXACT_PARITY: Legacy intersection counting
            NOTELENS_CONNECTION_THRESHOLD: Minimum similarity for a connection
            NOTELENS_RECENT_WINDOW_DAYS: Recency window for trends
            NOTELENS_TREND_MIN_COUNT: Category occurrences needed for a trend
            NOTELENS_TREND_MIN_RECENT: Recent occurrences needed for a trend
            NOTELENS_MINDMAP_MAX_CATEGORIES: Category nodes on the mind map
            NOTELENS_MINDMAP_MAX_KEYWORDS: Keyword nodes on the mind map
            NOTELENS_MINDMAP_MAX_ACTION_ITEMS: Action item nodes on the mind map
            NOTELENS_ADVICE_INTERVAL_HOURS: Hours between two pieces of advice
            NOTELENS_ADVICE_STATE_PATH: JSON file for the advice throttle
            NOTELENS_LOG_LEVEL: Log level
            NOTELENS_LOG_TO_FILE: Write JSON logs to NOTELENS_LOG_DIR
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None or value == "":
                return default
            try:
                if isinstance(default, bool):
                    return str(value).lower() in ("true", "1", "yes")
                if isinstance(default, int):
                    return int(value)
                if isinstance(default, float):
                    return float(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {key}: {value!r}", context={"key": key}
                ) from e
            return value

        insight_defaults = InsightConfig()
        mindmap_defaults = MindMapConfig()

        return cls(
            similarity=SimilarityConfig(
                exact_parity=get_env("NOTELENS_SIMILARITY_EXACT_PARITY", False),
            ),
            insights=InsightConfig(
                connection_threshold=get_env(
                    "NOTELENS_CONNECTION_THRESHOLD", insight_defaults.connection_threshold
                ),
                recent_window_days=get_env(
                    "NOTELENS_RECENT_WINDOW_DAYS", insight_defaults.recent_window_days
                ),
                trend_min_count=get_env("NOTELENS_TREND_MIN_COUNT", insight_defaults.trend_min_count),
                trend_min_recent=get_env(
                    "NOTELENS_TREND_MIN_RECENT", insight_defaults.trend_min_recent
                ),
            ),
            mindmap=MindMapConfig(
                max_categories=get_env(
                    "NOTELENS_MINDMAP_MAX_CATEGORIES", mindmap_defaults.max_categories
                ),
                max_keywords=get_env("NOTELENS_MINDMAP_MAX_KEYWORDS", mindmap_defaults.max_keywords),
                max_action_items=get_env(
                    "NOTELENS_MINDMAP_MAX_ACTION_ITEMS", mindmap_defaults.max_action_items
                ),
            ),
            advice=AdviceConfig(
                interval_hours=get_env("NOTELENS_ADVICE_INTERVAL_HOURS", 24.0),
                state_path=get_env("NOTELENS_ADVICE_STATE_PATH"),
            ),
            logging=LoggingConfig(
                level=get_env("NOTELENS_LOG_LEVEL", "INFO"),
                log_to_file=get_env("NOTELENS_LOG_TO_FILE", False),
                log_dir=get_env("NOTELENS_LOG_DIR", "logs"),
                file_rotation=get_env("NOTELENS_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("NOTELENS_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("NOTELENS_LOG_COMPRESSION", "zip"),
                serialize=get_env("NOTELENS_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls(**(data or {}))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        final_dict = {**config_dict}

        # Apply env overrides (non-default sections only)
        default = cls()
        for section in ("similarity", "insights", "mindmap", "advice", "logging"):
            env_section = getattr(env_config, section)
            if env_section != getattr(default, section):
                final_dict[section] = env_section.model_dump()

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
