"""
Configuration system for Ordered Form
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["text", "table", "json", "yaml"]
TRUE_VALUES = ["true", "1", "yes"]


@dataclass
class LoaderConfig:
    """Configuration for reading item documents"""

    name_key: str = "name"
    position_key: str = "position"
    items_key: str = "items"  # Used when the document root is a mapping


@dataclass
class OutputConfig:
    """Configuration for rendering resolved orders"""

    format: str = "text"  # text, table, json, or yaml
    show_positions: bool = False


@dataclass
class Config:
    """Main configuration class for Ordered Form"""

    # General settings
    verbose: bool = False
    quiet: bool = False

    # Sub-configurations
    loader: LoaderConfig = field(default_factory=LoaderConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    config_file: str | None = None

    @classmethod
    def from_file(cls, filepath: Path) -> "Config":
        """Load configuration from YAML or JSON file"""
        if not filepath.exists():
            logger.warning(f"Config file not found: {filepath}")
            return cls()

        try:
            with open(filepath, "r") as f:
                if filepath.suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                elif filepath.suffix == ".json":
                    data = json.load(f)
                else:
                    logger.error(f"Unsupported config file format: {filepath.suffix}")
                    return cls()

            config = cls._from_dict(data or {})
            config.config_file = str(filepath)
            return config
        except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
            logger.error(f"Error loading config file: {e}")
            return cls()

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config instance from dictionary"""
        config = cls()

        for key in ["verbose", "quiet"]:
            if key in data:
                setattr(config, key, data[key])

        if "loader" in data:
            config.loader = LoaderConfig(**data["loader"])
        if "output" in data:
            config.output = OutputConfig(**data["output"])

        return config

    @classmethod
    def load_hierarchy(cls, project_dir: Path | None = None) -> "Config":
        """Load configuration from hierarchy: global -> project -> env vars"""
        config = cls()

        # 1. Load global config
        global_config = Path.home() / ".ordered-form" / "config.yaml"
        if global_config.exists():
            config = cls.from_file(global_config)
            logger.debug(f"Loaded global config from {global_config}")

        # 2. Load project config
        if project_dir:
            project_config = project_dir / ".ordered-form.yaml"
            if project_config.exists():
                project_data = cls.from_file(project_config)
                config.merge(project_data)
                logger.debug(f"Loaded project config from {project_config}")

        # 3. Apply environment variables
        config.apply_env_vars()

        return config

    def merge(self, other: "Config") -> None:
        """Merge another config into this one (other takes precedence)"""
        if other.config_file:
            self.config_file = other.config_file

        # Merge boolean flags (only if explicitly set to True)
        for flag in ["verbose", "quiet"]:
            if getattr(other, flag):
                setattr(self, flag, True)

        self._merge_dataclass(self.loader, other.loader)
        self._merge_dataclass(self.output, other.output)

    def _merge_dataclass(self, target: Any, source: Any) -> None:
        """Merge source dataclass into target"""
        for field_name in source.__dataclass_fields__:
            source_value = getattr(source, field_name)
            if source_value != getattr(target.__class__(), field_name):
                setattr(target, field_name, source_value)

    def apply_env_vars(self) -> None:
        """Apply environment variables to configuration"""
        if os.environ.get("ORDERED_FORM_VERBOSE", "").lower() in TRUE_VALUES:
            self.verbose = True

        if os.environ.get("ORDERED_FORM_QUIET", "").lower() in TRUE_VALUES:
            self.quiet = True

        if output_format := os.environ.get("ORDERED_FORM_OUTPUT_FORMAT"):
            self.output.format = output_format

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if self.output.format not in OUTPUT_FORMATS:
            errors.append(f"Invalid output format: {self.output.format}")

        for key_name in ["name_key", "position_key", "items_key"]:
            if not getattr(self.loader, key_name):
                errors.append(f"Loader {key_name} must not be empty")

        if self.loader.name_key == self.loader.position_key:
            errors.append("Loader name_key and position_key must differ")

        if self.verbose and self.quiet:
            errors.append("verbose and quiet cannot both be enabled")

        return errors

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "verbose": self.verbose,
            "quiet": self.quiet,
            "loader": asdict(self.loader),
            "output": asdict(self.output),
        }

    def save(self, filepath: Path) -> None:
        """Save configuration to file"""
        data = self.to_dict()

        with open(filepath, "w") as f:
            if filepath.suffix in [".yaml", ".yml"]:
                yaml.safe_dump(data, f, default_flow_style=False)
            elif filepath.suffix == ".json":
                json.dump(data, f, indent=2)
            else:
                raise ValueError(f"Unsupported config file format: {filepath.suffix}")
