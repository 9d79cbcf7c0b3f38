# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for qsd.

This module defines dataclasses representing all configurable aspects of qsd,
including environment variables, remote connection settings, reporter styles,
target options, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by qsd."""

    # Enables qsd debug mode.
    debug_mode: str = "QSD_DEBUG"
    # Path to an explicit qsd config file.
    config: str = "QSD_CONFIG"
    # Default target to submit to.
    target: str = "QSD_TARGET"
    # Default subscription id.
    subscription: str = "QSD_SUBSCRIPTION"
    # Default resource group name.
    resource_group: str = "QSD_RESOURCE_GROUP"
    # Default workspace name.
    workspace: str = "QSD_WORKSPACE"
    # Access token picked up when no token is provided explicitly.
    access_token: str = "QSD_ACCESS_TOKEN"


@dataclass
class RemoteSettings:
    """Settings for communication with the remote workspace."""

    # Base URI used when none is provided.
    default_base_uri: str = "https://westus.quantum.azure.com"
    # Version of the remote jobs API.
    api_version: str = "v1.0"
    # Timeout for a single HTTP request in seconds.
    timeout: float = 30.0
    # Number of retries for transient HTTP failures.
    retry_attempts: int = 3
    # Base backoff (in seconds) between retries.
    retry_backoff: float = 0.5
    # Whether to verify SSL certificates.
    verify_ssl: bool = True
    # User agent sent with every request.
    user_agent: str = "qsd"
    # Template of the human-friendly job status page.
    portal_uri_template: str = (
        "https://portal.azure.com/#@/resource/subscriptions/{subscription}"
        "/resourceGroups/{resource_group}/providers/Microsoft.Quantum"
        "/Workspaces/{workspace}/job_management?microsoft_azure_quantum_jobmanagement_jobId={job_id}"
    )


@dataclass
class ReporterSettings:
    """Settings for ResultReporter."""

    # Banner printed when a dry run finds the program valid.
    valid_banner: str = "✔️  The program is valid!"
    # Banner printed when a dry run finds the program invalid.
    invalid_banner: str = "❌  The program is invalid."
    # Style of the unknown target error line.
    error_style: str = "bright_red"
    # Style of the link in the friendly output.
    link_style: str = "bright_blue"


@dataclass
class TargetSettings:
    """Settings related to target resolution."""

    # Target that resolves to a backend doing nothing.
    nothing: str = "nothing"
    # Default number of shots.
    default_shots: int = 500


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by qsd.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various outcomes."""

    # Returned when the target is unknown or the program is invalid.
    failure: int = 1
    # Default error code for failures of qsd commands.
    default: int = 91
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for qsd."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    remote: RemoteSettings = field(default_factory=RemoteSettings)
    reporter: ReporterSettings = field(default_factory=ReporterSettings)
    targets: TargetSettings = field(default_factory=TargetSettings)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the qsd binary.
    binary_name: str = "qsd"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read qsd config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config))
            else None,
            # 2. Current working directory
            Path.cwd() / "qsd_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "qsd"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for qsd.
CFG = Config.load()
