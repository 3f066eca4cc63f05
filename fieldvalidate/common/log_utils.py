"""Logging setup for applications embedding fieldvalidate.

The library itself only creates module loggers; applications call
configure_logging() once at startup if they want the bundled config.
"""

import json
import logging
import logging.config
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

DEFAULT_CONFIG_NAME = "logging-dev.json"


def default_config_path() -> Traversable:
    """Return the development logging config shipped inside the package."""
    return resources.files("fieldvalidate") / DEFAULT_CONFIG_NAME


def configure_logging(config_path: Path | Traversable | None = None) -> None:
    """Configure logging from a dictConfig JSON file.

    Args:
        config_path: Path to the JSON config (defaults to the packaged
            logging-dev.json)

    Falls back to a basic text format if the file is not found.
    """
    config_path = config_path or default_config_path()

    if config_path.is_file():
        logging.config.dictConfig(json.loads(config_path.read_text(encoding="utf-8")))
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
