"""Configuration management for suiterunner."""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

CONFIG_NAMES = ["suiterunner.json", ".suiterunner.json"]


class RunnerConfig(BaseModel):
    """Options that change how a suite is validated and executed."""

    default_priority: int = Field(default=5, description="Priority of tests declared without one")
    trim_csv_tokens: bool = Field(
        default=False, description="Strip surrounding whitespace from every CSV token"
    )
    teardown_on_failure: bool = Field(
        default=False, description="Run the after-suite hook when a test or per-test hook fails"
    )

    @field_validator("default_priority")
    @classmethod
    def validate_default_priority(cls, v: int) -> int:
        if not 1 <= v <= 10:
            raise ValueError("Default priority must be between 1 and 10")
        return v


class OutputConfig(BaseModel):
    """Console output configuration."""

    show_plan: bool = Field(default=False, description="Print the execution plan before running")


class SuiteRunnerConfig(BaseModel):
    """Main configuration for suiterunner."""

    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: str = Field(default="WARNING", description="Logging level for the CLI")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {sorted(allowed)}")
        return v.upper()

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_file(cls, path: Path | str) -> "SuiteRunnerConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def find_and_load(cls, start_dir: Path | str | None = None) -> "SuiteRunnerConfig":
        """Find and load a configuration file, searching up the directory tree.

        Falls back to the defaults when no file is found.
        """
        if start_dir is None:
            start_dir = Path.cwd()
        else:
            start_dir = Path(start_dir)

        current = start_dir.resolve()
        for directory in [current, *current.parents]:
            for name in CONFIG_NAMES:
                config_path = directory / name
                if config_path.exists():
                    return cls.from_file(config_path)

        return cls()

    def to_file(self, path: Path | str) -> None:
        """Save configuration to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)


def get_default_config() -> SuiteRunnerConfig:
    """Return a default configuration."""
    return SuiteRunnerConfig()


def create_example_config(output_path: Path | str) -> Path:
    """Create an example configuration file."""
    output_path = Path(output_path)
    config = get_default_config()
    config.output.show_plan = True
    config.to_file(output_path)
    return output_path
