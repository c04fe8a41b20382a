"""User settings for dsclean.

Default option values are read from the ``[defaults]`` table of
~/.config/dsclean/config.toml. Command-line flags take precedence
over values found here.

Example::

    [defaults]
    skip_hidden = true
    max_depth = 8
    workers = 4
    fail_on_error = false
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dsclean.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class CleanerSettings(BaseModel):
    """Default options for cleanup runs.

    Attributes:
        skip_hidden: Prune hidden directories by default.
        max_depth: Default maximum depth (None = unbounded).
        workers: Default number of parallel disposal workers.
        fail_on_error: Exit with status 1 when any disposal fails.
    """

    model_config = ConfigDict(extra="forbid")

    skip_hidden: bool = False
    max_depth: Annotated[
        int | None,
        Field(ge=1, description="Maximum traversal depth (None = unbounded)"),
    ] = None
    workers: Annotated[
        int,
        Field(ge=1, le=64, description="Parallel disposal workers (1-64)"),
    ] = 1
    fail_on_error: bool = False


class SettingsError(Exception):
    """Raised when the settings file cannot be read or is invalid."""


def load_settings(path: Path | None = None) -> CleanerSettings:
    """Load settings from a TOML file.

    A missing file is not an error; built-in defaults are returned.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated CleanerSettings object.

    Raises:
        SettingsError: If the file cannot be read, has invalid TOML
            syntax, or its content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return CleanerSettings()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings {settings_path}: {e}") from e

    defaults = data.get("defaults", {})
    if not isinstance(defaults, dict):
        raise SettingsError(f"Invalid 'defaults' section in {settings_path}")

    try:
        return CleanerSettings.model_validate(defaults)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e
