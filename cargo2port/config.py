"""
Configuration management using YAML files and dataclasses.

This module defines the configuration dataclasses and loads them from an
optional YAML file on top of defaults. Configuration sections:
- RegistryConfig: crate download settings
- ManifestConfig: lockfile naming
- OutputConfig: cargo.crates rendering settings
- LoggingConfig: logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import yaml


@dataclass
class RegistryConfig:
    """Configuration for downloading crates from the registry.

    Attributes:
        download_url: URL template with {name} and {version} placeholders
        timeout_seconds: HTTP request timeout
        retries: Number of retry attempts after a transport failure
        user_agent: HTTP User-Agent header string (crates.io rejects requests without one)
        trust_env: Whether to respect system proxy settings
    """

    download_url: str = "https://crates.io/api/v1/crates/{name}/{version}/download"
    timeout_seconds: float = 30.0
    retries: int = 2
    user_agent: str = "cargo2port (https://github.com/macports/cargo2port)"
    trust_env: bool = True


@dataclass
class ManifestConfig:
    """Configuration for locating lockfiles.

    Attributes:
        filename: Lockfile name looked up inside directories and crate archives
        default_source: Source used when no source is given on the command line
    """

    filename: str = "Cargo.lock"
    default_source: str = "Cargo.lock"


@dataclass
class OutputConfig:
    """Configuration for the rendered cargo.crates block.

    Attributes:
        align: Alignment mode ("plain", "maxlen", "multiline", "justify")
        line_width: Width at which multiline/justify rows are wrapped
        indent: Number of spaces before each package row
    """

    align: str = "justify"
    line_width: int = 80
    indent: int = 4


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to the console (stderr)
    """

    level: str = "WARNING"
    console: bool = True


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    registry: RegistryConfig = field(default_factory=RegistryConfig)
    manifest: ManifestConfig = field(default_factory=ManifestConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig.

    Unknown top-level sections are ignored.
    """
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        registry=RegistryConfig(**data["registry"]),
        manifest=ManifestConfig(**data["manifest"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
