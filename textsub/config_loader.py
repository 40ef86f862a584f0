"""Handles loading configuration from YAML files."""

import yaml
import os
import logging
from .exceptions import ConfigurationError
from .models import DEFAULT_DURATION
from .subtitle_formatter import DEFAULT_SRT_FILENAME

logger = logging.getLogger(__name__)

ERROR_PLACEHOLDER = "Error reading file. Please try again."

DEFAULT_CONFIG = {
    'duration': DEFAULT_DURATION,
    'normalize_punctuation': False,
    'output_filename': DEFAULT_SRT_FILENAME,
    'error_placeholder': ERROR_PLACEHOLDER,
    'log_dir': 'logs',
    'log_file': 'textsub.log',
}

def merge_with_defaults(config: dict) -> dict:
    """Returns a new dict with DEFAULT_CONFIG values for every key the config leaves out."""
    merged = dict(DEFAULT_CONFIG)
    merged.update({k: v for k, v in config.items() if v is not None})
    return merged

class ConfigLoader:
    """Loads configuration settings from a YAML file."""

    def load_config(self, config_path: str) -> dict:
        """
        Loads configuration from the specified YAML file path.

        An empty file yields an empty dictionary.

        Args:
            config_path: The path to the YAML configuration file.

        Returns:
            A dictionary containing the loaded configuration settings.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            ConfigurationError: If the file cannot be parsed as YAML or
                              if there are other reading errors.
        """
        logger.info(f"Attempting to load configuration from: {config_path}")
        if not os.path.exists(config_path):
            logger.error(f"Configuration file not found at path: {config_path}")
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        if not os.path.isfile(config_path):
             logger.error(f"Configuration path is not a file: {config_path}")
             raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Invalid YAML format in {config_path}: {e}") from e
        except OSError as e:
            logger.error(f"Error reading configuration file {config_path}: {e}", exc_info=True)
            raise ConfigurationError(f"Could not read configuration file {config_path}: {e}") from e

        if config is None:
            config = {}
        if not isinstance(config, dict):
            logger.error(f"Configuration file {config_path} did not load as a dictionary (root object).")
            raise ConfigurationError(f"Invalid YAML structure in {config_path}. Root must be a mapping (dictionary).")
        self._validate(config, config_path)
        logger.info(f"Configuration loaded successfully from {config_path}")
        return config

    def _validate(self, config: dict, config_path: str) -> None:
        duration = config.get('duration')
        if duration is not None:
            if isinstance(duration, bool) or not isinstance(duration, (int, float)) or duration <= 0:
                raise ConfigurationError(f"'duration' in {config_path} must be a positive number, got {duration!r}")
        normalize = config.get('normalize_punctuation')
        if normalize is not None and not isinstance(normalize, bool):
            raise ConfigurationError(f"'normalize_punctuation' in {config_path} must be true or false, got {normalize!r}")
