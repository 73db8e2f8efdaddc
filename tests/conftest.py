"""
Shared pytest fixtures for 2PeekMe CLI tests.
"""

import json
from unittest.mock import patch

import httpx
import pytest

from peekme_cli.client import PeekMeClient

BASE_URL = "https://api.2peek.me/"


class FakeApi:
    """
    In-memory stand-in for the 2PeekMe API, served through httpx.MockTransport.

    ``responses`` maps an endpoint ("key/info") to either an envelope dict,
    an httpx.Response, or an exception to raise.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: dict = {
            "key/get": {"success": True, "result": "generated-key-0001"},
            "key/create": {"success": True, "result": "created-key-0002"},
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.lstrip("/")
        response = self.responses.get(endpoint, {"success": True, "result": "ok"})
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    def calls(self, endpoint: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/" + endpoint]

    @property
    def endpoints(self) -> list[str]:
        return [r.url.path.lstrip("/") for r in self.requests]


@pytest.fixture
def fake_api():
    """
    Fake API recording every request it receives.

    Returns:
        FakeApi: The fake, with default success envelopes
    """
    return FakeApi()


@pytest.fixture
def api_client(fake_api):
    """
    PeekMeClient wired to the fake API.

    Returns:
        PeekMeClient: Client using an httpx.MockTransport
    """
    client = PeekMeClient(base_url=BASE_URL, transport=httpx.MockTransport(fake_api.handler))
    yield client
    client.close()


@pytest.fixture
def config_file(tmp_path):
    """
    Path of a config file that does not exist yet.

    Returns:
        Path: Location inside tmp_path
    """
    return tmp_path / ".2peekme-cli.json"


@pytest.fixture
def stored_config_file(config_file):
    """
    Config file already holding an API key.

    Returns:
        Path: Path to the config file
    """
    config_file.write_text(json.dumps({"apiKey": "stored-key-1234"}, indent=2))
    return config_file


@pytest.fixture
def run_cli(fake_api, config_file):
    """
    Run the CLI entry point against the fake API and the temporary config file.

    Returns:
        Callable taking argv and returning the process exit code
    """
    from peekme_cli.cli import main

    def _make_client(base_url=BASE_URL):
        return PeekMeClient(base_url=BASE_URL, transport=httpx.MockTransport(fake_api.handler))

    def _run(*argv: str, config_path=None) -> int:
        with (
            patch("peekme_cli.cli.CONFIG_FILE", config_path or config_file),
            patch("peekme_cli.cli.create_client", side_effect=_make_client),
        ):
            try:
                main(list(argv))
            except SystemExit as e:
                return e.code or 0
        return 0

    return _run
