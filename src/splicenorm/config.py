"""Configuration management for splicenorm.

Configuration comes from:
- Default values
- A TOML configuration file
- Command-line arguments (applied by the CLI on top of the file)

Example TOML file:

    [parse]
    program = "VAST-TOOLS"
    max_workers = 4

    [logging]
    verbosity = 2
    log_file = "splicenorm.log"

Example:
    >>> from splicenorm.config import Config
    >>> config = Config.load("splicenorm.toml")
    >>> config.parse.max_workers
    4
"""

import tomllib
from pathlib import Path
from typing import Any

import attrs

# =============================================================================
# Default Configuration Values
# =============================================================================

# Parsing defaults
DEFAULT_PROGRAM = "VAST-TOOLS"
DEFAULT_MAX_WORKERS = 1
DEFAULT_PROGRESS_INTERVAL = 1000

# Logging defaults
DEFAULT_VERBOSITY = 1


# =============================================================================
# Configuration Classes
# =============================================================================


def _positive(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise ValueError(f"{attribute.name} must be >= 1, got {value}")


@attrs.define
class ParseConfig:
    """Configuration for event parsing.

    Attributes:
        program: Program name stored on each normalized event.
        max_workers: Worker threads for batch parsing.
        progress_interval: Rows between progress log messages (0 disables).
    """

    program: str = DEFAULT_PROGRAM
    max_workers: int = attrs.field(default=DEFAULT_MAX_WORKERS, validator=_positive)
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL


@attrs.define
class LoggingConfig:
    """Configuration for logging.

    Attributes:
        verbosity: 0=warning, 1=info, 2=debug.
        log_file: Optional file receiving debug output.
        use_rich: Use rich for console output.
    """

    verbosity: int = DEFAULT_VERBOSITY
    log_file: str | None = None
    use_rich: bool = True


@attrs.define
class Config:
    """Main configuration container for splicenorm.

    Attributes:
        parse: Event parsing configuration.
        logging: Logging configuration.
    """

    parse: ParseConfig = attrs.Factory(ParseConfig)
    logging: LoggingConfig = attrs.Factory(LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Build configuration from a nested dictionary.

        Args:
            data: Mapping with optional "parse" and "logging" sections.

        Returns:
            Configuration object.

        Raises:
            ValueError: If a section or key is unknown or a value is invalid.
        """
        sections = {"parse": ParseConfig, "logging": LoggingConfig}

        unknown = set(data) - set(sections)
        if unknown:
            raise ValueError(f"Unknown configuration section(s): {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        for name, section_cls in sections.items():
            values = data.get(name, {})
            if not isinstance(values, dict):
                raise ValueError(f"Configuration section [{name}] must be a table")
            known = {a.name for a in attrs.fields(section_cls)}
            bad_keys = set(values) - known
            if bad_keys:
                raise ValueError(f"Unknown key(s) in [{name}]: {sorted(bad_keys)}")
            kwargs[name] = section_cls(**values)

        return cls(**kwargs)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "Config":
        """Load configuration from a TOML file.

        Args:
            path: Path to configuration file. If None, returns default
                configuration.

        Returns:
            Loaded configuration object.

        Raises:
            FileNotFoundError: If configuration file doesn't exist.
            ValueError: If configuration file is invalid.
        """
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid configuration file {path}: {e}") from e

        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation of configuration.
        """
        return attrs.asdict(self)
