
import copy
import logging
import os
import sys

import yaml

logger = logging.getLogger(__name__)

APP_NAME = "TextFieldTrans"
ENDPOINT_KEY = "api_url"

# Default configuration to fall back on if config.yml is missing or incomplete
DEFAULT_CONFIG = {
    ENDPOINT_KEY: "",
    "request_timeout": None,
    "single_flight": False,
    "log_file": None,
}


def user_config_dir():
    if sys.platform == "darwin":
        return os.path.join(os.path.expanduser("~"), "Library", "Application Support", APP_NAME)
    if sys.platform.startswith("win"):
        return os.path.join(os.environ.get("APPDATA", os.path.expanduser("~")), APP_NAME)

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return os.path.join(xdg, APP_NAME)
    return os.path.join(os.path.expanduser("~"), ".config", APP_NAME)


def default_config_path():
    return os.path.join(user_config_dir(), "config.yml")


def load_config(config_path=None):
    """
    Loads configuration from a YAML file.
    Returns a dictionary with configuration values, merged with defaults.
    """
    config_path = config_path or default_config_path()
    config = copy.deepcopy(DEFAULT_CONFIG)

    if not os.path.exists(config_path):
        logger.info("Configuration file '%s' not found. Using defaults.", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Error loading config file: %s", e)
        return config

    if isinstance(user_config, dict):
        config.update(user_config)
    elif user_config is not None:
        logger.warning("Ignoring config file '%s': expected a mapping", config_path)

    if config.get(ENDPOINT_KEY) is None:
        config[ENDPOINT_KEY] = ""
    elif not isinstance(config[ENDPOINT_KEY], str):
        logger.warning("Ignoring %s in '%s': expected a string, got %r",
                       ENDPOINT_KEY, config_path, config[ENDPOINT_KEY])
        config[ENDPOINT_KEY] = DEFAULT_CONFIG[ENDPOINT_KEY]

    return config


def save_config(config, config_path=None):
    config_path = config_path or default_config_path()
    directory = os.path.dirname(config_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f, default_flow_style=False, allow_unicode=True)


class EndpointConfig:
    """The translation endpoint URL, persisted under a single config key."""

    def __init__(self, config, config_path=None):
        self.config = config
        self.config_path = config_path or default_config_path()

    @property
    def url(self):
        return (self.config.get(ENDPOINT_KEY) or "").strip()

    def set_url(self, new_url):
        """Store the URL and persist the whole configuration."""
        new_url = (new_url or "").strip()
        self.config[ENDPOINT_KEY] = new_url
        try:
            save_config(self.config, self.config_path)
        except OSError as e:
            logger.error("Could not save API URL: %s", e)
            return False

        logger.info("API URL saved: %s", new_url)
        return True
