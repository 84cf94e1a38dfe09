import os
import sys
import logging
from typing import Optional

import yaml


DEFAULT_SETTINGS = {
    "roll_delay": 1.0,  # seconds the dice show as rolling
    "seed": None,
    "log_level": "INFO",
    "log_file": None,
}

SETTINGS_ENV_VAR = "YAHTZEE_SETTINGS"
SETTINGS_FILE = "settings.yaml"


def _resolve_path(path: Optional[str]) -> Optional[str]:
    if path:
        return path
    if os.environ.get(SETTINGS_ENV_VAR):
        return os.environ[SETTINGS_ENV_VAR]
    if os.path.exists(SETTINGS_FILE):
        return SETTINGS_FILE
    return None


def validate_settings(settings: dict) -> dict:
    try:
        roll_delay = float(settings["roll_delay"])
    except (TypeError, ValueError):
        raise ValueError("roll_delay must be a number, got %r" % settings["roll_delay"])
    if roll_delay < 0:
        raise ValueError("roll_delay must not be negative, got %s" % roll_delay)
    settings["roll_delay"] = roll_delay

    if settings["seed"] is not None:
        settings["seed"] = int(settings["seed"])

    level = settings["log_level"]
    if isinstance(level, int) and not isinstance(level, bool):
        # numeric levels are stored by name when logging knows one, e.g. 10 -> DEBUG
        name = logging.getLevelName(level)
        settings["log_level"] = name if isinstance(logging.getLevelName(name), int) else level
        return settings

    level = str(level).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError("unknown log_level %r" % settings["log_level"])
    settings["log_level"] = level

    return settings


def load_settings(path: Optional[str] = None) -> dict:
    """
    Read the game settings from a yaml file and merge them over the defaults.

    The file is taken from `path`, then the YAHTZEE_SETTINGS environment variable,
    then settings.yaml in the working directory. Without any of them the defaults are used.
    """
    settings = dict(DEFAULT_SETTINGS)

    path = _resolve_path(path)
    if path is None:
        return validate_settings(settings)

    with open(path, "r") as file:
        loaded = yaml.safe_load(file)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError("%s must contain a mapping of settings" % path)

    for key, value in loaded.items():
        if key not in DEFAULT_SETTINGS:
            logging.warning("ignoring unknown setting %s in %s" % (key, path))
            continue
        settings[key] = value

    logging.debug("settings loaded from %s: %s" % (path, settings))
    return validate_settings(settings)


def configure_logging(settings: dict) -> None:
    settings = validate_settings({**DEFAULT_SETTINGS, **settings})
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.get("log_file"):
        handlers.append(logging.FileHandler(settings["log_file"], mode="w"))

    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s - %(levelname)s: %(message)s", datefmt="%d-%b-%y %H:%M:%S",
        handlers=handlers,
        force=True
    )
