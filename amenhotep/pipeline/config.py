"""
Configuration for the indexer generator pipeline.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..exceptions import ConfigurationError


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    FORCE = "force"  # Default: overwrite
    ERROR_IF_EXISTS = "error"  # Raise error if file exists


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        directory: Directory generated files are written to
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.FORCE
    directory: str = "."
    atomic_write: bool = True


@dataclass
class CheckpointConfig:
    """Placeholders written into the Checkpoint run configuration."""

    network_node_url: str = "<CHANGE_ME>"
    contract: str = "<CHANGE_ME>"
    start: int = 0
    deploy_fn: str = "handleDeploy"


@dataclass
class GeneratorConfig:
    """Configuration options for indexer generation."""

    # Extension a file must carry to be scanned
    source_extension: str = ".cairo"

    # Encoding used to read source files
    encoding: str = "utf-8"

    # Checkpoint run configuration placeholders
    checkpoint: CheckpointConfig = field(default_factory=CheckpointConfig)

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "checkpoint" and isinstance(v, dict):
                config.checkpoint = CheckpointConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    directory=v.get("directory", "."),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    @staticmethod
    def from_file(path: Path | str) -> GeneratorConfig:
        """Load a config from a JSON file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        try:
            return GeneratorConfig.from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration file {path}: {e}") from e

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "source_extension": self.source_extension,
            "encoding": self.encoding,
            "checkpoint": {
                "network_node_url": self.checkpoint.network_node_url,
                "contract": self.checkpoint.contract,
                "start": self.checkpoint.start,
                "deploy_fn": self.checkpoint.deploy_fn,
            },
            "output": {
                "mode": self.output.mode.value,
                "directory": self.output.directory,
                "atomic_write": self.output.atomic_write,
            },
        }
