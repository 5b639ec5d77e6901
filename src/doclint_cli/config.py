import json
import logging
from pathlib import Path

from doclint_linter.config import LintConfig
from doclint_linter.errors import ConfigParseError
from pydantic import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".doclint.json"


def load_config(config_path: Path | None = None, cwd: Path | None = None) -> LintConfig:
    """Resolve the configuration for one invocation.

    Order: explicit path (if it exists), then .doclint.json in the working
    directory, then the built-in default. A file that exists but cannot be read
    or validated raises ConfigParseError.
    """
    if config_path and config_path.exists():
        return _load_from_file(config_path)
    if config_path:
        logger.debug(f"Config file {config_path} not found, falling back")

    discovered = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    if discovered.exists():
        return _load_from_file(discovered)

    logger.debug("Using built-in default configuration")
    return LintConfig.default()


def _load_from_file(path: Path) -> LintConfig:
    try:
        with open(path, "rb") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigParseError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigParseError(path, "top-level value must be a JSON object")

    try:
        config = LintConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(path, str(e)) from e

    logger.debug(f"Loaded config from {path} ({len(config.rules)} rules)")
    return config
