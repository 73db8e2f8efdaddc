"""
API key resolution for the 2PeekMe CLI.

A key given on the command line wins, then the stored one; when neither
exists a new key is generated by the API and saved.

Copyright (c) 2026 Snapp'
Author: Yannis Duvignau (yduvignau@snapp.fr)
"""

import enum
import logging
from typing import NamedTuple, Optional

from rich.console import Console

from peekme_cli.client import PeekMeClient
from peekme_cli.config import LocalConfig
from peekme_cli.validation import mask_key

logger = logging.getLogger(__name__)

console = Console()


class KeySource(enum.Enum):
    """Where a resolved API key came from."""

    EXPLICIT = "explicit"
    STORED = "stored"
    PROVISIONED = "provisioned"


class KeyResolution(NamedTuple):
    """API key to use for a request, along with its origin."""

    key: str
    source: KeySource

    @property
    def provisioned(self) -> bool:
        return self.source is KeySource.PROVISIONED


def resolve_key(
    client: PeekMeClient,
    config: LocalConfig,
    override_key: Optional[str] = None,
) -> KeyResolution:
    """
    Get the API key for the current command.

    Parameters:
        client: API client, used only when a key must be generated
        config: Configuration loaded for this invocation
        override_key: Key given on the command line, never persisted

    Returns:
        KeyResolution with the key and where it came from

    Raises:
        ApiError: If a key had to be generated and the API refused
        TransportError: If a key had to be generated and the request failed
    """
    if override_key:
        logger.debug("Using API key from command line (%s)", mask_key(override_key))
        return KeyResolution(override_key, KeySource.EXPLICIT)

    if config.api_key:
        logger.debug("Using stored API key (%s)", mask_key(config.api_key))
        return KeyResolution(config.api_key, KeySource.STORED)

    if config.load_error is not None:
        console.print(
            f"[yellow]⚠[/yellow] Could not read {config.store.path}, "
            "it will be replaced with a new API key"
        )
        logger.warning("Overwriting unreadable config file %s", config.store.path)

    logger.info("No API key configured, generating one")
    new_key = client.generate_key()
    if config.set_api_key(new_key):
        console.print("[bold green]✓[/bold green] New API key generated and saved successfully.")
    else:
        console.print("[yellow]⚠[/yellow] New API key generated but could not be saved")
    logger.info("Provisioned API key %s", mask_key(new_key))
    return KeyResolution(new_key, KeySource.PROVISIONED)
