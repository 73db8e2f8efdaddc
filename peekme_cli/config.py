"""
Local configuration storage for the 2PeekMe CLI.

The configuration is a single JSON file holding the API key. Reads and
writes come in two flavours: strict (``read``/``write``) raising
``ConfigError`` subclasses, and lenient (``load``/``save``) logging the
failure and carrying on with defaults.

Copyright (c) 2026 Snapp'
Author: Yannis Duvignau (yduvignau@snapp.fr)
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from peekme_cli.constants import CONFIG_FILE, CONFIG_FILE_MODE

logger = logging.getLogger(__name__)

API_KEY_FIELD = "apiKey"


class ConfigError(Exception):
    """Base class for local configuration I/O errors."""


class ConfigLoadError(ConfigError):
    """The configuration file exists but could not be read or parsed."""


class ConfigSaveError(ConfigError):
    """The configuration file could not be written."""


class ConfigStore:
    """
    Read and write the JSON configuration file.

    No locking is done: two CLI processes writing at the same time race,
    and the last writer wins.
    """

    def __init__(self, path: Path = CONFIG_FILE):
        self.path = Path(path)
        self.load_error: Optional[ConfigLoadError] = None

    def read(self) -> dict:
        """
        Read the configuration file.

        Returns:
            The stored mapping, or an empty dict if the file does not exist

        Raises:
            ConfigLoadError: If the file cannot be read or is not a JSON object
        """
        if not self.path.exists():
            logger.debug("No config file at %s", self.path)
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigLoadError(f"Error loading configuration: {e}") from e

        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"Error loading configuration: expected a JSON object in {self.path}"
            )
        return data

    def write(self, config: dict) -> None:
        """
        Write the configuration file with owner-only permissions.

        Parameters:
            config: Mapping to serialize

        Raises:
            ConfigSaveError: If the file cannot be written
        """
        payload = json.dumps(config, indent=2)
        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CONFIG_FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            # os.open only applies the mode on creation
            os.chmod(self.path, CONFIG_FILE_MODE)
        except OSError as e:
            raise ConfigSaveError(f"Error saving configuration: {e}") from e
        logger.debug("Configuration saved to %s", self.path)

    def load(self) -> dict:
        """
        Read the configuration, falling back to an empty dict on error.

        The error, if any, is kept in ``load_error``.

        Returns:
            The stored mapping, or an empty dict
        """
        self.load_error = None
        try:
            return self.read()
        except ConfigLoadError as e:
            logger.error("%s", e)
            self.load_error = e
            return {}

    def save(self, config: dict) -> bool:
        """
        Write the configuration, logging instead of raising on error.

        Parameters:
            config: Mapping to serialize

        Returns:
            True if the file was written, False otherwise
        """
        try:
            self.write(config)
            return True
        except ConfigSaveError as e:
            logger.error("%s", e)
            return False


@dataclass
class LocalConfig:
    """
    Configuration loaded once per invocation and handed to every command.

    ``load_error`` keeps the recoverable error met while loading, if any,
    so callers may decide to abort instead of running on defaults.
    """

    store: ConfigStore
    data: dict = field(default_factory=dict)
    load_error: Optional[ConfigError] = None

    @classmethod
    def load(cls, store: ConfigStore) -> "LocalConfig":
        data = store.load()
        return cls(store=store, data=data, load_error=store.load_error)

    @property
    def api_key(self) -> Optional[str]:
        return self.data.get(API_KEY_FIELD) or None

    def set_api_key(self, key: str) -> bool:
        """Store ``key`` and persist the file."""
        self.data[API_KEY_FIELD] = key
        return self.store.save(self.data)

    def clear_api_key(self) -> bool:
        """Drop the stored key and persist the file."""
        self.data.pop(API_KEY_FIELD, None)
        return self.store.save(self.data)
