"""
Pytest configuration and shared fixtures for github_client tests.
"""

from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest

from github_client import Client


class RecordingTransport:
    """Transport stub recording every call and returning canned responses."""

    def __init__(self, response: Any = None):
        self.options: Dict[str, Any] = {}
        self.calls: List[tuple] = []
        self.response = {} if response is None else response
        self.responses: List[Any] = []

    def _reply(self) -> Any:
        if self.responses:
            return self.responses.pop(0)
        return self.response

    def get(self, path, parameters, request_options):
        self.calls.append(("GET", path, parameters, request_options))
        return self._reply()

    def post(self, path, parameters, request_options):
        self.calls.append(("POST", path, parameters, request_options))
        return self._reply()

    def set_option(self, name, value):
        return self.set_options({name: value})

    def set_options(self, options):
        self.options = {**self.options, **options}
        return self

    def get_option(self, name, default=None):
        return self.options.get(name, default)


@pytest.fixture
def transport():
    """A recording transport."""
    return RecordingTransport()


@pytest.fixture
def client(transport):
    """A client wired to the recording transport."""
    return Client(transport)


def make_response(status_code: int = 200, text: str = "{}", headers: Optional[dict] = None) -> Mock:
    """Build a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.headers = headers or {}
    return response
