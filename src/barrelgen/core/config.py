"""
Configuration module for barrelgen.

Supports loading from YAML/JSON files with environment variable overrides.
Default values are loaded from defaults.yaml for maintainability.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

# Path to the default configuration file
_DEFAULTS_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

# Config file names looked up in the workspace root, in order
WORKSPACE_CONFIG_NAMES = (".barrelgen.yaml", ".barrelgen.yml", ".barrelgen.json")

# Cache for default values
_defaults_cache: dict[str, Any] | None = None


def _load_defaults() -> dict[str, Any]:
    """Load default configuration values from defaults.yaml."""
    global _defaults_cache

    if _defaults_cache is not None:
        return _defaults_cache

    if not _DEFAULTS_CONFIG_PATH.exists():
        logger.warning(f"Defaults config not found: {_DEFAULTS_CONFIG_PATH}")
        _defaults_cache = {}
        return _defaults_cache

    try:
        content = _DEFAULTS_CONFIG_PATH.read_text(encoding="utf-8")
        _defaults_cache = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse defaults config: {e}")
        _defaults_cache = {}

    return _defaults_cache


def _get_default(section: str, key: str, fallback: Any = None) -> Any:
    """Get a default value from the defaults config."""
    defaults = _load_defaults()
    section_defaults = defaults.get(section, {})
    return section_defaults.get(key, fallback)


@dataclass
class GenerationConfig:
    """Configuration for barrel file generation."""

    exclude_freezed: bool = field(
        default_factory=lambda: _get_default("barrel", "exclude_freezed", False)
    )
    exclude_generated: bool = field(
        default_factory=lambda: _get_default("barrel", "exclude_generated", False)
    )
    extension: str = field(default_factory=lambda: _get_default("barrel", "extension", ".dart"))
    ignore_patterns: list[str] = field(
        default_factory=lambda: list(
            _get_default("barrel", "ignore_patterns", [".git", ".dart_tool", ".svn", ".hg"])
        )
    )

    def __post_init__(self) -> None:
        """Coerce string toggles and give the extension its leading dot."""
        if isinstance(self.exclude_freezed, str):
            self.exclude_freezed = _parse_bool(self.exclude_freezed)
        if isinstance(self.exclude_generated, str):
            self.exclude_generated = _parse_bool(self.exclude_generated)
        if self.extension and not self.extension.startswith("."):
            self.extension = f".{self.extension}"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = field(default_factory=lambda: _get_default("logging", "level", "WARNING"))
    format: str = field(
        default_factory=lambda: _get_default(
            "logging", "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )


@dataclass
class BarrelConfig:
    """Main configuration class for barrelgen."""

    barrel: GenerationConfig = field(default_factory=GenerationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "BarrelConfig":
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file (.yaml, .yml, or .json)

        Returns:
            BarrelConfig instance with loaded values

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValueError: If the file format is unsupported
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        content = path.read_text(encoding="utf-8")

        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content) or {}
        elif path.suffix == ".json":
            data = json.loads(content) if content.strip() else {}
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "BarrelConfig":
        """Create BarrelConfig from a dictionary."""
        config = cls()

        if "barrel" in data:
            config.barrel = GenerationConfig(**data["barrel"])
        if "logging" in data:
            config.logging = LoggingConfig(**data["logging"])

        return config

    def apply_env_overrides(self) -> "BarrelConfig":
        """
        Apply environment variable overrides to the configuration.

        Environment variables follow the pattern: BARRELGEN_<KEY>
        Examples:
            - BARRELGEN_EXCLUDE_FREEZED
            - BARRELGEN_EXCLUDE_GENERATED
            - BARRELGEN_EXTENSION
            - BARRELGEN_LOGGING_LEVEL

        Returns:
            Self with environment overrides applied
        """
        env_mappings = {
            "BARRELGEN_EXCLUDE_FREEZED": ("barrel", "exclude_freezed", _parse_bool),
            "BARRELGEN_EXCLUDE_GENERATED": ("barrel", "exclude_generated", _parse_bool),
            "BARRELGEN_EXTENSION": ("barrel", "extension", _parse_extension),
            "BARRELGEN_LOGGING_LEVEL": ("logging", "level", str),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                section_obj = getattr(self, section)
                setattr(section_obj, key, converter(value))

        return self

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Serialize configuration to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def to_json(self) -> str:
        """Serialize configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: Path | str) -> None:
        """
        Save configuration to a file.

        Args:
            path: Path to save the configuration (.yaml, .yml, or .json)

        Raises:
            ValueError: If the file format is unsupported
        """
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            content = self.to_yaml()
        elif path.suffix == ".json":
            content = self.to_json()
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def _parse_bool(value: str) -> bool:
    """Parse a string to boolean."""
    return value.lower() in ("true", "1", "yes", "on")


def _parse_extension(value: str) -> str:
    value = value.strip()
    return value if value.startswith(".") else f".{value}"


def find_workspace_config(workspace_root: Path | str) -> Optional[Path]:
    """Return the first workspace config file present in ``workspace_root``."""
    root = Path(workspace_root)
    for name in WORKSPACE_CONFIG_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def load_config(
    config_path: Optional[Path | str] = None,
    workspace_root: Optional[Path | str] = None,
    apply_env: bool = True,
) -> BarrelConfig:
    """
    Load configuration with optional environment variable overrides.

    Args:
        config_path: Optional path to config file. If None, the workspace
            root is searched for a .barrelgen.{yaml,yml,json} file.
        workspace_root: Optional workspace root used for config discovery.
        apply_env: Whether to apply environment variable overrides.

    Returns:
        BarrelConfig instance
    """
    if config_path is None and workspace_root is not None:
        config_path = find_workspace_config(workspace_root)
        if config_path is not None:
            logger.debug(f"Using workspace config: {config_path}")

    if config_path:
        config = BarrelConfig.from_file(config_path)
    else:
        config = BarrelConfig()

    if apply_env:
        config.apply_env_overrides()

    return config
