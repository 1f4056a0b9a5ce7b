"""
Configuration management for badbehavior.

Loads settings from environment variables (and an optional .env file)
with sensible defaults. All configuration is centralized here to avoid
magic strings scattered throughout the codebase.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


# Where LogTen Pro for macOS keeps its Core Data store
DEFAULT_LOGTEN_STORE = os.path.join(
    '~/Library/Group Containers/group.com.coradine.LogTenPro',
    'LogTenProData_6583aa561ec1cc91302449b5',
    'LogTenCoreDataStore.sql',
)

OUTPUT_FORMATS = ('text', 'json')


def _default_max_workers() -> int:
    """Same bound concurrent.futures uses for its thread pools."""
    return min(32, (os.cpu_count() or 1) + 4)


@dataclass(frozen=True)
class LogbookConfig:
    """Location of the LogTen Pro logbook store."""
    path: str = os.path.expanduser(os.getenv('LOGTEN_DATA_STORE', DEFAULT_LOGTEN_STORE))


@dataclass(frozen=True)
class ValidationConfig:
    """Validation engine settings."""
    max_workers: int = int(os.getenv('BADBEHAVIOR_MAX_WORKERS', str(_default_max_workers())))


@dataclass(frozen=True)
class OutputConfig:
    """Report rendering settings."""
    format: str = os.getenv('BADBEHAVIOR_OUTPUT_FORMAT', 'text')


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    logbook: LogbookConfig
    validation: ValidationConfig
    output: OutputConfig

    debug: bool


def load_config() -> AppConfig:
    """Load and validate all configuration."""
    output = OutputConfig()
    if output.format not in OUTPUT_FORMATS:
        raise ValueError(
            f"BADBEHAVIOR_OUTPUT_FORMAT must be one of {', '.join(OUTPUT_FORMATS)}, "
            f"got {output.format!r}"
        )

    validation = ValidationConfig()
    if validation.max_workers < 1:
        raise ValueError(
            f"BADBEHAVIOR_MAX_WORKERS must be positive, got {validation.max_workers}"
        )

    return AppConfig(
        logbook=LogbookConfig(),
        validation=validation,
        output=output,
        debug=os.getenv('BADBEHAVIOR_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
