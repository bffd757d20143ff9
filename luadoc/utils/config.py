"""Configuration loader for the Lua documentation generator.

Loads settings from configs/config.yaml and provides typed access
to all configuration sections via dataclasses.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"
_DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ScannerConfig:
    """Configuration for the annotation scanner and file discovery.

    Attributes:
        extensions: File suffixes scanned during discovery.
        exclude_patterns: Path components skipped during discovery.
        comment_marker: Line comment marker of the host language.
        tag_marker: Marker that introduces an annotation tag.
        permissive: Whether untagged comment lines continue a block.
        lookahead: Number of lines after a block searched for a declaration.
        default_category: Category for undotted names without a class tag.
        placeholder_type: Type given to return entries that cannot be parsed.
        ignored_prefixes: Comment words that never continue a block.
    """

    extensions: list[str] = field(default_factory=lambda: [".lua"])
    exclude_patterns: list[str] = field(default_factory=lambda: [".git"])
    comment_marker: str = "--"
    tag_marker: str = "@"
    permissive: bool = True
    lookahead: int = 3
    default_category: str = "Global"
    placeholder_type: str = "any"
    ignored_prefixes: list[str] = field(default_factory=lambda: ["TODO", "FIXME"])


@dataclass
class OutputConfig:
    """Configuration for the interchange file and the static site."""

    docs_file: str = "docs.json"
    site_dir: str = "dist"
    site_title: str = "Documentation"
    footer: str = ""
    clean: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"
    format: str = _DEFAULT_LOG_FORMAT
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _build_scanner_config(data: dict) -> ScannerConfig:
    """Build a ScannerConfig from a dictionary.

    Args:
        data: Dictionary with scanner settings.

    Returns:
        A configured ScannerConfig instance.
    """
    defaults = ScannerConfig()
    return ScannerConfig(
        extensions=data.get("extensions", defaults.extensions),
        exclude_patterns=data.get("exclude_patterns", defaults.exclude_patterns),
        comment_marker=data.get("comment_marker", defaults.comment_marker),
        tag_marker=data.get("tag_marker", defaults.tag_marker),
        permissive=data.get("permissive", defaults.permissive),
        lookahead=data.get("lookahead", defaults.lookahead),
        default_category=data.get("default_category", defaults.default_category),
        placeholder_type=data.get("placeholder_type", defaults.placeholder_type),
        ignored_prefixes=data.get("ignored_prefixes", defaults.ignored_prefixes),
    )


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Reads the YAML config file and constructs a fully typed AppConfig
    object. Falls back to defaults for any missing values.

    Args:
        config_path: Path to the YAML config file. If None, uses the
            default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.warning("Config file not found at %s, using defaults", path)
        return AppConfig()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    logger.info("Loaded configuration from %s", path)

    output_data = raw.get("output", {})
    output_config = OutputConfig(
        docs_file=output_data.get("docs_file", "docs.json"),
        site_dir=output_data.get("site_dir", "dist"),
        site_title=output_data.get("site_title", "Documentation"),
        footer=output_data.get("footer", ""),
        clean=output_data.get("clean", True),
    )

    logging_data = raw.get("logging", {})
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        format=logging_data.get("format", _DEFAULT_LOG_FORMAT),
        file=logging_data.get("file"),
    )

    return AppConfig(
        scanner=_build_scanner_config(raw.get("scanner", {})),
        output=output_config,
        logging=logging_config,
    )
