"""Configuration Management with Pydantic.

This module implements the configuration models of the graphwalk command
line tool. Settings come from an optional YAML file and can be overridden
by environment variables.
"""

import os
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_FILES = ("graphwalk.yaml", "graphwalk.yml")
DEFAULT_LISTING_LIMIT = 200
LARGE_LISTING_THRESHOLD = 10_000


class LoggingConfig(BaseModel):
    """Logging settings.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render log events as JSON instead of console lines
    """

    level: str = Field(
        default="WARNING",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    model_config = {"str_strip_whitespace": True}


class OutputConfig(BaseModel):
    """Report output settings.

    Attributes:
        listing_limit: Largest vertex count for which full result listings are printed
        show_spanning_forest: Print the parent list after dfs/bfs orders
    """

    listing_limit: int = Field(
        default=DEFAULT_LISTING_LIMIT,
        ge=0,
        description="Maximum vertex count for full listings",
    )
    show_spanning_forest: bool = Field(
        default=True,
        description="Print spanning forest after traversals",
    )


class TraversalConfig(BaseModel):
    """Traversal settings.

    Attributes:
        start_vertex: Vertex dfs and bfs begin at
    """

    start_vertex: int = Field(
        default=1,
        ge=1,
        description="Traversal start vertex",
    )


class GraphwalkConfig(BaseModel):
    """Main configuration combining all settings."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    traversal: TraversalConfig = Field(default_factory=TraversalConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "GraphwalkConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated GraphwalkConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is empty, not valid YAML, or invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if not config_data:
            msg = "Configuration file is empty"
            raise ValueError(msg)

        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config = cls(**cls._apply_env_overrides(config_data))
        logger.info(
            "configuration_loaded",
            logging_level=config.logging.level,
            listing_limit=config.output.listing_limit,
        )
        return config

    @classmethod
    def from_env(cls) -> "GraphwalkConfig":
        """Build a configuration from defaults and environment overrides only."""
        return cls(**cls._apply_env_overrides({}))

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply environment variable overrides to configuration.

        Args:
            config_data: Base configuration dictionary

        Returns:
            Configuration dictionary with environment overrides applied
        """
        env_overrides = {
            ("logging", "level"): "GRAPHWALK_LOG_LEVEL",
            ("logging", "json_logs"): "GRAPHWALK_JSON_LOGS",
            ("output", "listing_limit"): "GRAPHWALK_LISTING_LIMIT",
            ("output", "show_spanning_forest"): "GRAPHWALK_SHOW_FOREST",
            ("traversal", "start_vertex"): "GRAPHWALK_START_VERTEX",
        }

        for (section, key), env_var in env_overrides.items():
            value = os.environ.get(env_var)
            if value is None:
                continue

            if env_var.endswith(("_LIMIT", "_VERTEX")):
                try:
                    value = int(value)
                except ValueError as e:
                    msg = f"{env_var} must be an integer, got {value!r}"
                    raise ValueError(msg) from e
            elif env_var.endswith(("_LOGS", "_FOREST")):
                value = value.lower() in ("true", "1", "yes")
            else:
                value = value.upper()

            config_data.setdefault(section, {})[key] = value
            logger.debug("env_override_applied", env_var=env_var, config_path=f"{section}.{key}")

        return config_data

    def validate_config(self) -> list[str]:
        """Validate configuration and return list of warnings.

        Returns:
            List of validation warning messages (empty if no warnings)
        """
        warnings = []

        if self.output.listing_limit == 0:
            warnings.append("Listing limit is 0 - result listings will never be printed")

        if self.output.listing_limit > LARGE_LISTING_THRESHOLD:
            warnings.append(
                f"Listing limit is high ({self.output.listing_limit}) - "
                "reports for large graphs may be very long",
            )

        if self.logging.level == "DEBUG":
            warnings.append("DEBUG logging emits events for every algorithm call")

        return warnings


def load_config(config_path: str | Path | None = None) -> GraphwalkConfig:
    """Load configuration from file, or defaults when no file is present.

    Args:
        config_path: Path to configuration file. If None, looks for
            graphwalk.yaml or graphwalk.yml in the current directory and falls
            back to defaults plus environment overrides.

    Returns:
        Loaded GraphwalkConfig instance

    Raises:
        FileNotFoundError: If an explicit config file is not found
        ValueError: If the config file is invalid
    """
    if config_path is None:
        for default_name in DEFAULT_CONFIG_FILES:
            default_path = Path(default_name)
            if default_path.exists():
                config_path = default_path
                break
        else:
            logger.debug("no_configuration_file_using_defaults")
            return GraphwalkConfig.from_env()

    return GraphwalkConfig.from_yaml(config_path)


__all__ = [
    "GraphwalkConfig",
    "LoggingConfig",
    "OutputConfig",
    "TraversalConfig",
    "load_config",
]
