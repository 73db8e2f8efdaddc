"""
Command handlers for the 2PeekMe CLI.

Each handler prompts for missing fields, resolves the API key, sends a
single request and prints the outcome. Handlers return True on success
and False on failure so the entry point can pick the exit code.

Copyright (c) 2026 Snapp'
Author: Yannis Duvignau (yduvignau@snapp.fr)
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from peekme_cli.client import ApiError, PeekMeClient, TransportError
from peekme_cli.config import LocalConfig
from peekme_cli.constants import RECORD_TYPE_HINT
from peekme_cli.credentials import resolve_key
from peekme_cli.validation import mask_key

logger = logging.getLogger(__name__)

console = Console()


def _ask(value: Optional[str], question: str) -> str:
    """Return ``value`` if given, otherwise prompt the user for it."""
    if value:
        return value
    return Prompt.ask(question)


def _printable(result: Any) -> Any:
    # Server strings may contain brackets rich would read as markup
    if isinstance(result, str):
        return escape(result)
    return result


def _report_failure(action: str, error: Exception) -> None:
    """Print and log a failed API call."""
    if isinstance(error, ApiError):
        console.print(f"[bold red]✗ Error:[/bold red] {escape(str(error))}")
        logger.error("API error while trying to %s: %s", action, error)
    else:
        console.print(f"[bold red]✗[/bold red] {escape(str(error))}")
        logger.error("Transport error while trying to %s: %s", action, error, exc_info=True)
    console.print(f"[bold red]Failed to {action}.[/bold red]")


# ========= Key management ============


def set_key(config: LocalConfig, key: str) -> bool:
    """
    Store an API key locally without contacting the API.

    Parameters:
        config: Configuration for this invocation
        key: The key to store

    Returns:
        True if the key was saved
    """
    if not config.set_api_key(key):
        console.print("[bold red]✗[/bold red] Could not save the API key")
        return False
    console.print("[bold green]✓[/bold green] API key successfully configured.")
    logger.info("API key set to %s", mask_key(key))
    return True


def create_key(client: PeekMeClient, config: LocalConfig) -> bool:
    """
    Create a new API key on the server and store it.

    Parameters:
        client: API client
        config: Configuration for this invocation

    Returns:
        True on success
    """
    try:
        data = client.request("key/create")
    except (ApiError, TransportError) as e:
        _report_failure("create API key", e)
        return False

    new_key = data.get("result")
    if not new_key:
        console.print("[bold red]✗[/bold red] The API did not return a key")
        console.print("[bold red]Failed to create API key.[/bold red]")
        return False

    if not config.set_api_key(new_key):
        console.print("[yellow]⚠[/yellow] API key created but could not be saved locally")
    console.print("[bold green]✓ API key created successfully:[/bold green]", escape(str(new_key)))
    logger.info("Created API key %s", mask_key(new_key))
    return True


def delete_key(client: PeekMeClient, config: LocalConfig, override_key: Optional[str] = None) -> bool:
    """
    Delete an API key on the server and forget it locally.

    The stored key is only removed when it is the one being deleted.

    Parameters:
        client: API client
        config: Configuration for this invocation
        override_key: Key to delete instead of the stored one

    Returns:
        True on success
    """
    try:
        resolution = resolve_key(client, config, override_key)
        data = client.request("key/delete", {"key": resolution.key})
    except (ApiError, TransportError) as e:
        _report_failure("delete API key", e)
        return False

    if config.api_key == resolution.key:
        config.clear_api_key()
    console.print(
        "[bold green]✓ API key deleted successfully:[/bold green]",
        _printable(data.get("result")),
    )
    logger.info("Deleted API key %s", mask_key(resolution.key))
    return True


def key_info(client: PeekMeClient, config: LocalConfig, override_key: Optional[str] = None) -> bool:
    """
    Show what the server knows about the API key.

    Parameters:
        client: API client
        config: Configuration for this invocation
        override_key: Key to inspect instead of the stored one

    Returns:
        True on success
    """
    try:
        resolution = resolve_key(client, config, override_key)
        data = client.request("key/info", {"key": resolution.key})
    except (ApiError, TransportError) as e:
        _report_failure("retrieve key info", e)
        return False

    console.print("[bold green]Key Info:[/bold green]", _printable(data.get("result")))
    return True


# ========= Subdomains ============


def create_subdomain(
    client: PeekMeClient,
    config: LocalConfig,
    name: Optional[str] = None,
    record_type: Optional[str] = None,
    value: Optional[str] = None,
    override_key: Optional[str] = None,
) -> bool:
    """
    Create a subdomain record.

    Parameters:
        client: API client
        config: Configuration for this invocation
        name: Subdomain name, prompted if missing
        record_type: DNS record type, prompted if missing
        value: Record value, prompted if missing
        override_key: API key to use instead of the stored one

    Returns:
        True on success
    """
    name = _ask(name, "Enter subdomain name")
    record_type = _ask(record_type, f"Enter record type ({RECORD_TYPE_HINT})")
    value = _ask(value, "Enter record value")

    try:
        resolution = resolve_key(client, config, override_key)
        data = client.request("subdomain/create", {
            "key": resolution.key,
            "subdomain": name,
            "type": record_type,
            "value": value,
        })
    except (ApiError, TransportError) as e:
        _report_failure("create subdomain", e)
        return False

    console.print(
        "[bold green]✓ Subdomain created successfully:[/bold green]",
        _printable(data.get("result")),
    )
    logger.info("Created %s record %s → %s", record_type, name, value)
    return True


def update_subdomain(
    client: PeekMeClient,
    config: LocalConfig,
    name: Optional[str] = None,
    record_type: Optional[str] = None,
    value: Optional[str] = None,
    override_key: Optional[str] = None,
) -> bool:
    """
    Update an existing subdomain record.

    Parameters:
        client: API client
        config: Configuration for this invocation
        name: Subdomain name, prompted if missing
        record_type: New DNS record type, prompted if missing
        value: New record value, prompted if missing
        override_key: API key to use instead of the stored one

    Returns:
        True on success
    """
    name = _ask(name, "Enter subdomain name")
    record_type = _ask(record_type, f"Enter new record type ({RECORD_TYPE_HINT})")
    value = _ask(value, "Enter new record value")

    try:
        resolution = resolve_key(client, config, override_key)
        data = client.request("subdomain/update", {
            "key": resolution.key,
            "subdomain": name,
            "type": record_type,
            "value": value,
        })
    except (ApiError, TransportError) as e:
        _report_failure("update subdomain", e)
        return False

    console.print(
        "[bold green]✓ Subdomain updated successfully:[/bold green]",
        _printable(data.get("result")),
    )
    logger.info("Updated %s record %s → %s", record_type, name, value)
    return True


def delete_subdomain(
    client: PeekMeClient,
    config: LocalConfig,
    name: Optional[str] = None,
    override_key: Optional[str] = None,
) -> bool:
    """
    Delete a subdomain.

    Parameters:
        client: API client
        config: Configuration for this invocation
        name: Subdomain name, prompted if missing
        override_key: API key to use instead of the stored one

    Returns:
        True on success
    """
    name = _ask(name, "Enter subdomain name")

    try:
        resolution = resolve_key(client, config, override_key)
        data = client.request("subdomain/delete", {"key": resolution.key, "subdomain": name})
    except (ApiError, TransportError) as e:
        _report_failure("delete subdomain", e)
        return False

    console.print(
        "[bold green]✓ Subdomain deleted successfully:[/bold green]",
        _printable(data.get("result")),
    )
    logger.info("Deleted subdomain %s", name)
    return True


def list_subdomains(
    client: PeekMeClient,
    config: LocalConfig,
    override_key: Optional[str] = None,
) -> bool:
    """
    List every subdomain owned by the API key.

    Parameters:
        client: API client
        config: Configuration for this invocation
        override_key: API key to use instead of the stored one

    Returns:
        True on success
    """
    try:
        resolution = resolve_key(client, config, override_key)
        data = client.request("subdomain/list", {"key": resolution.key})
    except (ApiError, TransportError) as e:
        _report_failure("list subdomains", e)
        return False

    subdomains = data.get("subdomains")
    if not isinstance(subdomains, list):
        console.print("[bold red]Failed to retrieve subdomains or no subdomains found.[/bold red]")
        logger.error("subdomain/list answered without a subdomains list")
        return False

    if not subdomains:
        console.print("[yellow]ℹ[/yellow] No subdomains found.")
        return True

    logger.debug("Fetched %d subdomains", len(subdomains))
    for subdomain in subdomains:
        if not isinstance(subdomain, dict):
            console.print(f"[yellow]⚠[/yellow] Skipping malformed entry: {escape(repr(subdomain))}")
            logger.warning("Skipping malformed subdomain entry: %r", subdomain)
            continue
        console.print(f"[yellow]- Subdomain: {escape(str(subdomain.get('name', '')))}[/yellow]")
        console.print(f"[cyan]    Type: {escape(str(subdomain.get('type', '')))}[/cyan]")
        console.print(f"[magenta]    Value: {escape(str(subdomain.get('value', '')))}[/magenta]")
        console.print(f"[dim]    Created At: {escape(str(subdomain.get('created_at', '')))}[/dim]")
        console.print()
    return True
